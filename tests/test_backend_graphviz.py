"""Tests for the Graphviz DOT exporter."""

import graphviz
from figflow.backend.graphviz import GraphvizExporter
from figflow.core.ir import FlowConnection, FlowGraph


def graph_with(*connections):
    return FlowGraph(document_name="Doc", page_name="Page", extracted_at="t", connections=tuple(connections))


def test_to_digraph_returns_digraph(shop_graph):
    dot = GraphvizExporter.to_digraph(shop_graph)

    assert isinstance(dot, graphviz.Digraph)
    assert dot.name == "Shop App - Checkout"


def test_nodes_declared_once():
    graph = graph_with(
        FlowConnection("a", "Login", "b", "Home", "Click", "Navigate"),
        FlowConnection("b", "Home", "a", "Login", "Click", "Back"),
    )

    source = GraphvizExporter.to_dot(graph)

    assert source.count("shape=box") == 2
    assert "a [label=Login shape=box]" in source
    assert "a -> b [label=Click]" in source
    assert "b -> a [label=Click]" in source


def test_ids_are_sanitized(shop_graph):
    source = GraphvizExporter.to_dot(shop_graph)

    assert '"1_10" -> "9_99" [label="After 800ms"]' in source
    assert "\"1:" not in source


def test_empty_graph_has_placeholder():
    source = GraphvizExporter.to_dot(graph_with())

    assert 'NoData [label="No interactions found" shape=plaintext]' in source
