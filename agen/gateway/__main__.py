import uvicorn

from agen.config import GatewayBind, Settings
from agen.runtime import configure_logging


def main() -> None:
    configure_logging(Settings.from_env())
    bind = GatewayBind.from_env()
    uvicorn.run("agen.gateway.server:app", host=bind.host, port=bind.port, reload=False)


if __name__ == "__main__":
    main()
