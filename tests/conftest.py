"""
Shared fixtures: sample PDF text in the shapes the extractor has to handle.
"""

import pytest


COURSE_TEXT = """Ethics for Financial Planners
3 CEU Credit Hours
Governing Body: ABC
Board Number #4521

Table of Contents

Instructions for Taking This Course ..... ii
Chapter 1 Professional Standards ..... 1
1.1 Duties to Clients ..... 3
1.2 Conflicts of Interest ..... 7
Chapter 2 Fiduciary Practice ..... 15
2.1 Disclosure ..... 16
2.1.1 Written Disclosures ..... 18
Chapter 3 Case Studies ..... 30
Final Examination ..... 45

Introduction
This course covers the professional standards that apply to planners.
Chapter 1 Professional Standards
"""


@pytest.fixture
def course_text():
    """Course PDF text: front matter, a Contents heading, entries, then the body."""
    return COURSE_TEXT


@pytest.fixture(autouse=True)
def no_config_file(tmp_path, monkeypatch):
    """Point config lookup at a file that does not exist so tests use defaults."""
    monkeypatch.setenv("TOC_EXTRACT_CONFIG", str(tmp_path / "missing.json"))
