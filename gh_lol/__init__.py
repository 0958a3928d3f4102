"""gh-lol: a novelty GitHub CLI extension that spams and yells at issues."""

__version__ = "0.1.0"
