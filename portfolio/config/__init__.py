from portfolio.config.settings import settings

__all__ = ["settings"]
