import logging

from studio_quote.core.services.catalog import load_pricing_config
from studio_quote.ui.layouts.main_window import MainWindow


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = load_pricing_config()
    app = MainWindow(config)
    app.mainloop()


if __name__ == "__main__":
    main()
