import config


def test_policy_constants():
    assert config.CLOSING_COST_PCT == 3.0
    assert config.MAX_DEBT_TO_INCOME_PCT == 36.0
    assert config.COMPARISON_TERM_YEARS == 30
    assert config.SCHEDULE_PREVIEW_ROWS == 24


def test_compare_defaults():
    assert config.PROPERTY_1["price"] == 300_000
    assert config.PROPERTY_2["expenses"] == 450


def test_missing_file_loads_empty(tmp_path):
    assert config._load_yaml(tmp_path / "missing.yaml") == {}
