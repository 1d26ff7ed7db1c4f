"""Opening a database file and loading its configuration."""

from .pager import Pager
from .storage import CONFIG_PAGE_SIZE, Config, ConfigPage


class Database:
    """An open database: its configuration and the pager over its file."""

    def __init__(self, config, pager):
        self.config = config
        self.pager = pager

    @classmethod
    def init(cls, path):
        """Open the database at ``path`` and read its configuration page."""
        pager = Pager(path)
        try:
            first_page = pager.read(0)
            config_page = ConfigPage.from_bytes(first_page[:CONFIG_PAGE_SIZE])
        except BaseException:
            pager.close()
            raise
        return cls(Config.from_config_page(config_page), pager)

    def close(self):
        """Close the underlying file and release its lock."""
        self.pager.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"Database(config={self.config!r}, pager={self.pager!r})"