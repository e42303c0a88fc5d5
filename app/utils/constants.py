# app/utils/constants.py

"""
Global constants for price codes and statement formats.
These constants are imported by both models and services.
"""


class PriceCode:
    REGULAR = "regular"
    NEW_RELEASE = "new_release"
    CHILDRENS = "childrens"


class StatementFormat:
    TEXT = "text"
    HTML = "html"

