"""Launch the trail segmenter FastAPI server."""

import uvicorn

from trail_segmenter import config


def main():
    uvicorn.run(
        "trail_segmenter.server:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
        reload=True,
    )


if __name__ == "__main__":
    main()
