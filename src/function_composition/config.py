"""
Configuration for the composition playground.

Defaults live in dataclasses; `load_config` merges command-line style
overrides (``work_hours.start_hour=8``) on top of them with OmegaConf.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from omegaconf import OmegaConf


DEFAULT_COMPANIES = {
    "AAPL": "http://apple.com",
    "GOOGL": "http://google.com",
    "MSFT": "http://microsoft.com",
}

DEFAULT_PAGES = {
    "http://apple.com": "<html><head><title>Apple</title></head><body><h1>Apple</h1><p>Think different.</p></body></html>",
    "http://google.com": "<html><head><title>Google</title></head><body><h1>Google</h1><p>Search the world's information.</p></body></html>",
    "http://microsoft.com": "<html><head><title>Microsoft</title></head><body><h1>Microsoft</h1><p>Empower every person.</p></body></html>",
}

SAMPLE_CSV = "\n".join([
    "Ace,Ale,Are",
    "Bag,Beg,Bug",
    "Car,Cat",
])


@dataclass
class CsvConfig:
    """Configuration for the CSV row filter."""

    separator: str = ","
    row_length: int = 3

    def __post_init__(self):
        if len(self.separator) == 0:
            raise ValueError("separator must be a non-empty string")
        if self.row_length < 1:
            raise ValueError("row_length must be >= 1")


@dataclass
class CompanyConfig:
    """Symbol -> URL map and the in-memory pages served for those URLs."""

    companies: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COMPANIES))
    pages: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PAGES))


@dataclass
class WorkHoursConfig:
    """Inclusive range of working hours."""

    start_hour: int = 9
    end_hour: int = 17

    def __post_init__(self):
        if not (0 <= self.start_hour <= 23) or not (0 <= self.end_hour <= 23):
            raise ValueError("start_hour and end_hour must be in [0, 23]")
        if self.start_hour > self.end_hour:
            raise ValueError("start_hour must not be after end_hour")


@dataclass
class PlaygroundConfig:
    """Complete playground configuration."""

    csv: CsvConfig = field(default_factory=CsvConfig)
    company: CompanyConfig = field(default_factory=CompanyConfig)
    work_hours: WorkHoursConfig = field(default_factory=WorkHoursConfig)
    verbose: bool = False


def load_config(overrides: Optional[List[str]] = None) -> PlaygroundConfig:
    """
    Build a PlaygroundConfig from the defaults plus dotlist overrides.

    Parameters:
    -----------
    overrides : list of str, optional
        Entries of the form ``key.subkey=value``

    Returns:
    --------
    PlaygroundConfig
        Validated configuration

    Raises:
    -------
    omegaconf.errors.ValidationError
        If an override has the wrong type
    ValueError
        If a value is out of range
    """
    cfg = OmegaConf.structured(PlaygroundConfig)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    # to_object re-instantiates the dataclasses, so __post_init__ checks run here
    return OmegaConf.to_object(cfg)
