class UpstreamError(Exception):
    """An outbound API (Gemini, Marketstack) failed or answered with garbage."""

    def __init__(self, service: str, message: str, status_code: int = 502):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")
