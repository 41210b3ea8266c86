from Locator.Locator import FormLocator, locate, resolve_url

__all__ = ["FormLocator", "locate", "resolve_url"]
