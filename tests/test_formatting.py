from renopilot.formatting import format_area, format_currency, format_time, format_volume


def test_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(72.612) == "$72.61"
    assert format_currency(-15) == "-$15.00"
    assert format_currency("not a number") == "$0.00"
    assert format_currency(10, symbol="A$") == "A$10.00"


def test_area_and_volume():
    assert format_area(7.802) == "7.80 m²"
    assert format_volume(2.5) == "2.50 L"


def test_time():
    assert format_time(30) == "30m"
    assert format_time(65) == "1h 5m"
    assert format_time(120) == "2h 0m"
    assert format_time(0) == "0m"


def test_time_rounds_before_splitting():
    assert format_time(119.6) == "2h 0m"
    assert format_time(59.4) == "59m"
