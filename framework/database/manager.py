from .sql_driver import SQLDriver

class DatabaseManager:
    _instance = None

    def __init__(self, settings):
        self.sql = SQLDriver(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    async def reset_instance(cls) -> None:
        """Dispose the current instance so the next get_instance() rebuilds it."""
        if cls._instance is not None:
            await cls._instance.sql.disconnect()
            cls._instance = None
