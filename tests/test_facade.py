import data_utilities
from data_utilities import DataUtilities


def test_static_helpers():
    assert DataUtilities.title_case("php and html") == "PHP and HTML"
    assert DataUtilities.overlap("abcdefg", "fgjkli") == "fg"
    assert DataUtilities.load_csv_to_list(None) is None
    assert DataUtilities.url_from_path("/", {}) is None


def test_public_api():
    for name in data_utilities.__all__:
        assert hasattr(data_utilities, name)
