from __future__ import annotations

import importlib
import logging
from typing import Iterable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.model import AttendanceRecord
from .container import build_container
from .employees.controller import register as register_employees
from .employees.model import Employee
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(
    *,
    settings=None,
    employees: Iterable[Employee] = (),
    attendance: Iterable[AttendanceRecord] = (),
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module: Optional[str] = None
    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(settings, employees=employees, attendance=attendance)
    logger.info(
        "payroll-system ready settings=%s employment_insurance_rate=%s income_tax_rate=%s",
        settings_module or getattr(settings, "__name__", "custom"),
        container.rates.employment_insurance_rate,
        container.rates.income_tax_rate,
    )

    register_employees(app, container)
    register_payroll(app, container)

    return app
