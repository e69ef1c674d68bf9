"""
Webhook poster using requests
"""

from collections.abc import Mapping

import requests

from perfaudit_core.infrastructure.notifiers.base import WebhookPoster, WebhookResponse


class RequestsWebhookPoster(WebhookPoster):
    """POSTs JSON bodies with a requests session"""

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()

    def post(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> WebhookResponse:
        try:
            response = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers=dict(headers),
                timeout=timeout_seconds,
            )
        except requests.RequestException as e:
            return WebhookResponse(error=str(e))
        return WebhookResponse(status_code=response.status_code)
