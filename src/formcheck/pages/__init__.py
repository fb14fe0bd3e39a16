"""Page objects for the target site."""

from formcheck.pages.base_page import BasePage, make_run_timestamp
from formcheck.pages.home_page import HomePage

__all__ = ["BasePage", "HomePage", "make_run_timestamp"]
