from xml.etree import ElementTree

import pytest

DIGEST = "3c0a2b4f5e6d7a8b9c0d1e2f3a4b5c6d7e8f9012"


@pytest.fixture
def digest():
    return DIGEST


def parse(markup):
    return ElementTree.fromstring(markup)


def shapes(root, tag):
    """All descendants named ``tag``, namespace-agnostic."""
    return [el for el in root.iter() if el.tag == tag or el.tag.endswith("}" + tag)]
