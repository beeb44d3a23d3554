"""Backend entrypoint: serves a bank account over HTTP with host/port from settings."""
import uvicorn

from surrogate.config.settings import get_settings
from surrogate.domain.models import BankAccount
from surrogate.main import create_app


def main() -> None:
    settings = get_settings()
    app = create_app(BankAccount(settings.starting_balance), settings)
    uvicorn.run(app, host=settings.remote_host, port=settings.remote_port)


if __name__ == "__main__":
    main()
