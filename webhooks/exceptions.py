class WebhookError(Exception):
    """Base exception for webhook errors"""

    pass


class WebhookDeliveryError(WebhookError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Webhook delivery to {url} failed: {reason}")
        self.url = url
        self.reason = reason
