import io
import unittest
from unittest.mock import Mock, patch

import requests

from wait_for.checks.http_check import run_http
from wait_for.errors import CheckFailed, HttpStatusFailed, RequestFailed
from wait_for.output import PlainReporter


class HttpCheckTests(unittest.TestCase):
    def setUp(self) -> None:
        self.out = io.StringIO()
        self.reporter = PlainReporter(stdout=self.out, stderr=io.StringIO())

    def test_2xx_succeeds(self) -> None:
        response = Mock(status_code=204, reason="No Content")
        with patch("wait_for.checks.http_check.requests.get", return_value=response) as mock_get:
            res = run_http("http://example.local/health", self.reporter)

        mock_get.assert_called_once_with("http://example.local/health", timeout=2.0)
        self.assertGreaterEqual(res.latency_ms, 0)
        self.assertEqual(res.status_code, 204)
        self.assertIn(
            "HTTP request to http://example.local/health succeeded (status: 204 No Content)",
            self.out.getvalue(),
        )

    def test_custom_timeout(self) -> None:
        response = Mock(status_code=200, reason="OK")
        with patch("wait_for.checks.http_check.requests.get", return_value=response) as mock_get:
            run_http("http://example.local/", self.reporter, timeout_s=5)

        mock_get.assert_called_once_with("http://example.local/", timeout=5)

    def test_non_2xx_raises_status_failure(self) -> None:
        for code, reason in ((301, "Moved Permanently"), (404, "Not Found"), (503, "Service Unavailable")):
            with self.subTest(code=code):
                response = Mock(status_code=code, reason=reason)
                with patch("wait_for.checks.http_check.requests.get", return_value=response):
                    with self.assertRaises(HttpStatusFailed) as ctx:
                        run_http("http://example.local/health", self.reporter)

                self.assertEqual(ctx.exception.status_code, code)
                self.assertIn(f"failed with status: {code} {reason}", str(ctx.exception))
                self.assertIsInstance(ctx.exception, CheckFailed)

        self.assertEqual(self.out.getvalue(), "")

    def test_transport_error_raises_request_failed(self) -> None:
        with patch(
            "wait_for.checks.http_check.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with self.assertRaises(RequestFailed) as ctx:
                run_http("http://example.local/health", self.reporter)

        self.assertIn("Failed to send HTTP request to http://example.local/health", str(ctx.exception))
        self.assertIn("connection refused", str(ctx.exception))

    def test_timeout_raises_request_failed(self) -> None:
        with patch(
            "wait_for.checks.http_check.requests.get",
            side_effect=requests.Timeout("timed out"),
        ):
            with self.assertRaises(RequestFailed):
                run_http("http://example.local/health", self.reporter)

    def test_quiet_success_prints_nothing(self) -> None:
        response = Mock(status_code=200, reason="OK")
        with patch("wait_for.checks.http_check.requests.get", return_value=response):
            run_http("http://example.local/health", self.reporter, quiet=True)

        self.assertEqual(self.out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
