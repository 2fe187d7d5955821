"""Pytest configuration: per-test outcome lines, debug logging for the calculator package."""

import logging

import pytest


def pytest_configure(config):
    logging.getLogger("exprcalc").setLevel(logging.DEBUG)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {report.outcome.upper()}")
