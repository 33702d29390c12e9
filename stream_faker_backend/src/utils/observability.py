import os
import asyncio
import logging
from functools import wraps
from typing import Optional

from langfuse import Langfuse, observe

logger = logging.getLogger(__name__)


def langfuse_credentials_present() -> bool:
    return bool(os.getenv("LANGFUSE_PUBLIC_KEY") and os.getenv("LANGFUSE_SECRET_KEY"))


class ObservabilityManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ObservabilityManager, cls).__new__(cls)
            cls._instance.client = None
            cls._instance.initialize()
        return cls._instance

    def initialize(self):
        # Support both naming conventions
        host = os.getenv("LANGFUSE_BASE_URL") or os.getenv("LANGFUSE_HOST", "https://cloud.langfuse.com")

        if langfuse_credentials_present():
            try:
                self.client = Langfuse(
                    public_key=os.getenv("LANGFUSE_PUBLIC_KEY"),
                    secret_key=os.getenv("LANGFUSE_SECRET_KEY"),
                    host=host,
                )
                logger.info(f"Langfuse observability initialized successfully. Host: {host}")
            except Exception as e:
                logger.error(f"Failed to initialize Langfuse: {e}")
        else:
            logger.warning("Langfuse credentials not found. Observability disabled.")

    def check_health(self) -> dict:
        if self.client is None:
            return {"status": "disabled", "message": "Langfuse not configured (missing credentials)"}

        try:
            self.client.auth_check()
            return {"status": "healthy", "message": "Langfuse connection OK"}
        except Exception as e:
            return {"status": "unhealthy", "message": f"Langfuse auth failed: {e}"}


def trace_step(name: Optional[str] = None):
    """
    Decorator to trace a function execution in Langfuse.
    If Langfuse is not configured, it simply runs the function.
    """

    def decorator(func):
        if not langfuse_credentials_present():
            return func

        @observe(name=name or func.__name__)
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            return await func(*args, **kwargs)

        @observe(name=name or func.__name__)
        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
