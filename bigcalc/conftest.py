import pytest

from bigcalc.classifier import Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture(autouse=True)
def clear_bigcalc_env(monkeypatch):
    for name in ("BIGCALC_PROMPT", "BIGCALC_HISTORY_FILE", "BIGCALC_USE_HISTORY", "BIGCALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
