import uvicorn

from game_reviews.config import get_settings


def main() -> None:
    """Run the API with uvicorn (`python -m game_reviews` or the `game-reviews-api` script)."""
    settings = get_settings()
    uvicorn.run(
        "game_reviews.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # logging is configured by create_app
    )


if __name__ == "__main__":
    main()
