import pytest
from omegaconf.errors import ConfigKeyError, ValidationError

from function_composition.config import (
    DEFAULT_COMPANIES,
    CsvConfig,
    PlaygroundConfig,
    WorkHoursConfig,
    load_config,
)


def test_defaults():
    config = load_config()
    assert isinstance(config, PlaygroundConfig)
    assert config.csv.separator == ","
    assert config.csv.row_length == 3
    assert config.work_hours.start_hour == 9
    assert config.work_hours.end_hour == 17
    assert config.company.companies == DEFAULT_COMPANIES
    assert config.verbose is False


def test_overrides():
    config = load_config(["csv.row_length=2", "work_hours.start_hour=8", "company.companies.IBM=http://ibm.com", "verbose=true"])
    assert config.csv.row_length == 2
    assert config.work_hours.start_hour == 8
    assert config.company.companies["IBM"] == "http://ibm.com"
    assert config.company.companies["AAPL"] == "http://apple.com"
    assert config.verbose is True


def test_override_type_mismatch():
    with pytest.raises(ValidationError):
        load_config(["csv.row_length=three"])


def test_unknown_key():
    with pytest.raises(ConfigKeyError):
        load_config(["csv.quote=x"])


def test_range_validation():
    with pytest.raises(ValueError):
        WorkHoursConfig(start_hour=18, end_hour=9)
    with pytest.raises(ValueError):
        WorkHoursConfig(start_hour=-1)
    with pytest.raises(ValueError):
        CsvConfig(row_length=0)
    with pytest.raises(ValueError):
        load_config(["work_hours.end_hour=30"])
