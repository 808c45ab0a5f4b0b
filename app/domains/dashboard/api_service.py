import requests
import logging
from app.config.setting import settings


class DashboardAPI:
    def __init__(self, base_url=None, timeout=None):
        """Thin client for the transactions API used by the dashboard"""
        self.base_url = (base_url or settings.dashboard_api_url).rstrip("/")
        self.timeout = timeout or settings.dashboard_timeout

    def _get(self, path, params):
        url = f"{self.base_url}{path}"
        logging.debug(f"GET {url} params={params}")
        response = requests.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_statistics(self, month):
        return self._get("/statistics", {"month": month})

    def get_bar_chart_data(self, month):
        return self._get("/bar-chart", {"month": month})

    def get_pie_chart_data(self, month):
        return self._get("/pie-chart", {"month": month})

    def get_combined_data(self, month):
        return self._get("/combined-data", {"month": month})

    def get_transactions(self, search="", page=1, per_page=10):
        return self._get("", {"search": search, "page": page, "per_page": per_page})
