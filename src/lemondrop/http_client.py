import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter, Retry

logger = logging.getLogger(__name__)


class HttpClient:
    """Single-attempt JSON transport; status handling is left to the caller."""

    def __init__(self, timeout: Optional[float], user_agent: str) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        retry_policy = Retry(total=0, raise_on_status=False)
        adapter = HTTPAdapter(max_retries=retry_policy, pool_connections=4, pool_maxsize=16)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        logger.debug("%s %s params=%s", method, url, params)
        # json= sets Content-Type: application/json
        return self.session.request(method, url, params=params, json=payload, timeout=self.timeout)

    def close(self) -> None:
        self.session.close()
