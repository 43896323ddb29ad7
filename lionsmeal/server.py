from flask import Flask, Response, request

from .config import Config
from .exceptions import MenuError
from .get_menu import collect_menus
from .records import DateFormat, dumps_records


app = Flask(__name__)


@app.errorhandler(MenuError)
def menu_unavailable(e):
    app.logger.error("Menu scrape failed: %s", e)
    return str(e), 502


@app.route("/")
def index():
    return "Lionsmeal is running!"


@app.route("/menu")
def menu():
    try:
        config = Config()
    except ValueError as e:
        app.logger.error("Invalid configuration: %s", e)
        return f"Invalid configuration: {e}", 500

    raw_format = request.args.get("date_format")
    try:
        date_format = DateFormat(raw_format) if raw_format else config.date_format
    except ValueError:
        return f"Unknown date_format: {raw_format}", 400

    days = collect_menus(config.urls, **config.scraper_options())
    return Response(dumps_records(days, date_format), mimetype="application/json")


if __name__ == "__main__":
    app.run(debug=True)
