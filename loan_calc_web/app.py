import logging
import os
import sys

from flask import Flask, render_template, request

from loan_calc.engine import compute_amortization
from loan_calc.errors import InvalidParameter
from loan_calc.formatter import DEFAULT_CURRENCY_SYMBOL, format_money
from loan_calc.main import build_parameters_from_options
from loan_calc_web.view_model import CalculatorView

FIELD_LABELS = {
    "principal": "Loan Amount",
    "annual_rate": "Interest Rate",
    "term_months": "Loan Term",
}


def _calculate(view: CalculatorView, logger: logging.Logger) -> CalculatorView:
    try:
        params = build_parameters_from_options(view.principal_text, view.rate_text, view.term_text)
        summary, schedule = compute_amortization(params)
    except InvalidParameter as exc:
        logger.info("Rejected loan input %s: %s", exc.field, exc.reason)
        label = FIELD_LABELS.get(exc.field, exc.field)
        return view.with_error(f"{label}: {exc.reason}.")
    return view.with_result(summary, schedule)


def create_app(config=None) -> Flask:
    app = Flask(__name__)
    app.config["ASSET_VERSION"] = os.environ.get("ASSET_VERSION", "1")
    app.config["CURRENCY_SYMBOL"] = os.environ.get("LOAN_CALC_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    if config:
        app.config.update(config)

    @app.template_filter("money")
    def money_filter(value):
        return format_money(value, app.config["CURRENCY_SYMBOL"])

    @app.route("/", methods=["GET", "POST"])
    def index():
        view = CalculatorView()
        status = 200

        if request.method == "POST":
            action = request.form.get("action", "calculate")
            view = _calculate(CalculatorView.from_form(request.form), app.logger)
            if action == "toggle":
                view = view.toggled()
            if view.error:
                status = 400

        return (
            render_template(
                "index.html",
                view=view,
                asset_version=app.config["ASSET_VERSION"],
            ),
            status,
        )

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    app.logger.info("Starting Loan Calculator web app...")
    app.run(host="0.0.0.0", port=8710, debug=True)
