import requests
import logging


class ProductFeedAPI:
    def __init__(self, url, timeout=30.0):
        """Client for the remote product-transaction JSON feed"""
        self.url = url
        self.timeout = timeout

    def fetch_products(self):
        """Download the feed and return its list of product objects"""
        logging.info(f"Fetching product feed from {self.url}")
        response = requests.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array from {self.url}, got {type(data).__name__}")
        return data
