import sys
import os
import pytest
sys.path.append(os.path.dirname(__file__))

from sample_document import create_shop_document
from figflow.frontend.nodes import DocumentSnapshot
from figflow.frontend.walker import FlowExtractor

FIXED_TIME = "2026-01-15T09:30:00.000Z"


@pytest.fixture
def shop_document():
    return create_shop_document()


@pytest.fixture
def shop_snapshot(shop_document):
    return DocumentSnapshot(shop_document)


@pytest.fixture
def shop_graph(shop_snapshot):
    return FlowExtractor(shop_snapshot, clock=lambda: FIXED_TIME).extract_page()
