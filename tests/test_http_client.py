import json
import unittest
from unittest import mock
from urllib.parse import parse_qs, urlsplit

from lemondrop.client import Lemondrop
from lemondrop.config import ClientConfig
from lemondrop.http_client import HttpClient
from lemondrop.registry import default_registry
from tests.fakes import EXECUTE_SUCCESS, ORDER_RESPONSE, make_response

SOL = "So11111111111111111111111111111111111111112"
WBTC = "3NZ9JMVBmGAqocybic2c7LQCJScmgsAZ6vQqTDzcqmJh"
TAKER = "TakerWallet1111111111111111111111111111111"


class HttpClientTests(unittest.TestCase):
    def test_session_is_single_attempt(self) -> None:
        http = HttpClient(timeout=None, user_agent="lemondrop/test")
        self.addCleanup(http.close)

        adapter = http.session.get_adapter("https://lite-api.jup.ag")
        self.assertEqual(adapter.max_retries.total, 0)
        self.assertEqual(http.session.headers["User-Agent"], "lemondrop/test")


class WireRequestTests(unittest.TestCase):
    """Runs the real requests preparation with only Session.send replaced."""

    def setUp(self) -> None:
        self.http = HttpClient(timeout=None, user_agent="lemondrop/test")
        self.client = Lemondrop(config=ClientConfig(base_url="https://jup"), http=self.http)
        self.addCleanup(self.client.close)

    def _sent(self, response):
        patcher = mock.patch.object(self.http.session, "send", return_value=response)
        send = patcher.start()
        self.addCleanup(patcher.stop)
        return send

    def test_order_is_get_with_query_string_and_no_body(self) -> None:
        send = self._sent(make_response(200, ORDER_RESPONSE))

        self.client.create_order(SOL, WBTC, "1.5", TAKER)

        prepared = send.call_args[0][0]
        parts = urlsplit(prepared.url)
        self.assertEqual(prepared.method, "GET")
        self.assertEqual(f"{parts.scheme}://{parts.netloc}{parts.path}", "https://jup/ultra/v1/order")
        self.assertEqual(
            parse_qs(parts.query),
            {
                "inputMint": [SOL],
                "outputMint": [WBTC],
                "amount": ["1500000000"],
                "taker": [TAKER],
                "feeAccount": [default_registry().fee_account_for(WBTC)],
                "feeBps": ["100"],
            },
        )
        self.assertIsNone(prepared.body)
        self.assertNotIn("Content-Type", prepared.headers)
        self.assertEqual(prepared.headers["User-Agent"], "lemondrop/test")

    def test_execute_is_post_with_json_body(self) -> None:
        send = self._sent(make_response(200, EXECUTE_SUCCESS))

        self.client.execute_order("signed-tx", "req-123")

        prepared = send.call_args[0][0]
        self.assertEqual(prepared.method, "POST")
        self.assertEqual(prepared.url, "https://jup/ultra/v1/execute")
        self.assertEqual(prepared.headers["Content-Type"], "application/json")
        self.assertEqual(json.loads(prepared.body), {"signedTransaction": "signed-tx", "requestId": "req-123"})
        self.assertEqual(urlsplit(prepared.url).query, "")


if __name__ == "__main__":
    unittest.main()
