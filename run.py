"""Server run script."""

import uvicorn
from buildcalc.api.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "buildcalc.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
