# File: tests/test_html_parser.py
import warnings

import pytest
from bs4 import MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup, XMLParsedAsHTMLWarning

import page_stats.parser.html_parser as html_parser
from page_stats.errors import ParseError
from page_stats.parser.html_parser import ContentStats, count_words, extract_stats
from tests.conftest import SAMPLE_HTML, SAMPLE_IMAGES, SAMPLE_LINKS, SAMPLE_WORDS


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a\n\n  b   c", 3),
        ("", 0),
        (" \t\n ", 0),
        ("single", 1),
        ("  leading and trailing  ", 3),
        ("non\xa0breaking\u2003space", 3),
    ],
)
def test_count_words(text, expected):
    assert count_words(text) == expected


def test_script_and_style_text_excluded():
    stats = extract_stats("<script>ignored text here</script><p>hello world</p>")
    assert stats.word_count == 2


def test_only_script_and_style_gives_zero_words():
    markup = "<style>p { margin: 0 }</style><script>let a = 1; let b = 2;</script>"
    assert extract_stats(markup).word_count == 0


def test_elements_inside_script_are_not_counted():
    markup = '<script>document.write("<a href=x>link</a><img src=y>")</script>'
    stats = extract_stats(markup)
    assert (stats.link_count, stats.image_count, stats.word_count) == (0, 0, 0)


def test_counts_independent_of_nesting():
    markup = """
    <a href="1">one</a>
    <div><section><a href="2"><span><img src="i1"></span></a></section></div>
    <ul><li><ul><li><a>three</a><img src="i2"/></li></ul></li></ul>
    """
    stats = extract_stats(markup)
    assert stats.link_count == 3
    assert stats.image_count == 2


def test_adjacent_text_nodes_are_separated():
    assert extract_stats("<p>hello</p><p>world</p>").word_count == 2


def test_whitespace_between_nodes_collapses():
    assert extract_stats("<div>\n  a  \n</div>\n\n<div>\tb\n</div>").word_count == 2


def test_comments_and_doctype_are_not_text():
    markup = "<!DOCTYPE html><!-- one two three --><p>four</p>"
    assert extract_stats(markup).word_count == 1


def test_sample_document():
    assert extract_stats(SAMPLE_HTML) == ContentStats(
        word_count=SAMPLE_WORDS, image_count=SAMPLE_IMAGES, link_count=SAMPLE_LINKS
    )


def test_bytes_input_is_decoded():
    markup = "<p>café crème</p><img src=x>".encode("utf-8")
    stats = extract_stats(markup)
    assert stats.word_count == 2
    assert stats.image_count == 1


def test_malformed_markup_is_tolerated():
    stats = extract_stats("<p>unclosed <a href='x'>link <div>text")
    assert stats.link_count == 1
    assert stats.word_count == 3


def test_deep_nesting_does_not_recurse():
    depth = 1500
    markup = "<div>" * depth + "<a>deep</a>" + "</div>" * depth
    stats = extract_stats(markup)
    assert stats.link_count == 1
    assert stats.word_count == 1


def test_rejected_markup_raises_parse_error(monkeypatch):
    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("cannot handle this")

    monkeypatch.setattr(html_parser, "BeautifulSoup", reject)
    with pytest.raises(ParseError) as info:
        extract_stats("<p>x</p>")
    assert isinstance(info.value.__cause__, ParserRejectedMarkup)
    assert "ParserRejectedMarkup" in str(info.value)


@pytest.mark.parametrize(
    "markup",
    [
        '<?xml version="1.0" encoding="utf-8"?><root><a href="x">x</a></root>',
        "http://example.com",
    ],
)
def test_xml_and_url_like_bodies_do_not_warn(markup):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        stats = extract_stats(markup)
    noisy = [w for w in caught if issubclass(w.category, (XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning))]
    assert noisy == []
    assert stats.word_count == 1
