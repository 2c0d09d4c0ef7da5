# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.utils.settings import HOST, PORT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

logger.info(
    f"Storefront ready: {len(app.state.context.products)} products, "
    f"{len(app.state.context.orders)} orders seeded"
)


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
