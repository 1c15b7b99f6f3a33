from function_composition.examples.company import (
    make_company_resolver,
    make_page_fetcher,
    text_from_html,
    url_for_company,
)

COMPANIES = {"AAPL": "http://apple.com"}


def test_url_for_company():
    assert url_for_company("AAPL") == "http://apple.com"
    assert url_for_company("MSFT") == "http://microsoft.com"
    assert url_for_company("UNKNOWN") is None
    assert url_for_company("BAD", {"BAD": "not a url"}) is None


def test_page_fetcher():
    fetch = make_page_fetcher({"http://a.com": "<p>é</p>"})
    assert fetch("http://a.com") == "<p>é</p>".encode("utf-8")
    assert fetch("http://b.com") is None


def test_text_from_html():
    html = b"<html><head><style>p {}</style></head><body><h1>Hi</h1>\n<p>there  you</p></body></html>"
    assert text_from_html(html) == "Hi there you"
    assert text_from_html(b"\xff\xfe") is None
    assert text_from_html(b"<div></div>") is None


def test_known_symbol_runs_all_steps():
    fetched = []

    def fetch(url):
        fetched.append(url)
        return b"<h1>Apple</h1>"

    resolve = make_company_resolver(companies=COMPANIES, fetch=fetch)
    assert resolve("AAPL") == "Apple"
    assert fetched == ["http://apple.com"]


def test_unknown_symbol_stops_after_lookup():
    fetched = []

    def fetch(url):
        fetched.append(url)
        return b"<h1>never</h1>"

    resolve = make_company_resolver(companies=COMPANIES, fetch=fetch)
    assert resolve("UNKNOWN") is None
    assert fetched == []


def test_missing_page_yields_none():
    resolve = make_company_resolver(companies=COMPANIES, pages={})
    assert resolve("AAPL") is None


def test_default_pages():
    assert make_company_resolver()("GOOGL") == "Google Google Search the world's information."


def test_verbose_resolver_prints_steps_that_run(capsys):
    resolve = make_company_resolver(companies=COMPANIES, pages={}, verbose=True)
    assert resolve("AAPL") is None
    assert capsys.readouterr().out.splitlines() == ["url: http://apple.com", "data: None"]
