class ENDPOINTS:
    def __init__(self, api_prefix: str = "api"):
        self.api_prefix = f"/{api_prefix}"

    TRANSLATE = "/translate"

    def build_url(self, pattern: str, **kwargs) -> str:
        """Builds a URL from a pattern and keyword arguments to replace placeholders."""
        return f"{self.api_prefix}{pattern.format(**kwargs)}"

    def translate(self) -> str:
        return self.build_url(self.TRANSLATE)
