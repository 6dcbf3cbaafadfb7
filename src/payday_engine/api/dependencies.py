"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from payday_engine.config import Settings, get_settings

# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
