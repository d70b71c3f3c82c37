"""
Pytest configuration for RDF hierarchy tests.

Provides shared fixtures for unit tests and BDD step definitions.
"""

import pytest

from rdf_hierarchy import (
    HierarchyConfig,
    HierarchyRenderer,
    HierarchyService,
    TripleIngestor,
)


SAMPLE_TRIPLES = """\
@prefix ies: <http://ies.data.gov.uk/ontology/ies4#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

# Classes
ies:Entity rdf:type rdfs:Class .
ies:Person rdfs:subClassOf ies:Entity .
ies:Employee rdfs:subClassOf ies:Person .
ies:Location rdfs:subClassOf ies:Entity .
ies:PersonState rdfs:subClassOf ies:State .
ies:PersonType ies:powertype ies:Person .

# Properties
ies:hasName rdfs:subPropertyOf ies:attribute .
ies:hasName rdfs:domain ies:Entity .
ies:hasName rdfs:range xsd:string .
ies:isPartOf rdfs:subPropertyOf ies:relationship .
ies:isPartOf rdfs:comment A relationship between a part and the whole .
"""

SAMPLE_FOREST = [
    "ies:Entity",
    "  ies:Location",
    "  ies:Person",
    "    ies:Employee",
    "    ies:PersonType",
    "ies:State",
    "  ies:PersonState",
    "ies:attribute",
    "  ies:hasName",
    "ies:relationship",
    "  ies:isPartOf",
]


@pytest.fixture
def config():
    """Default configuration: all roots, unbounded depth, two-space indent."""
    return HierarchyConfig()


@pytest.fixture
def ingestor(config):
    """Fresh ingestor writing into an empty graph."""
    return TripleIngestor(config)


@pytest.fixture
def renderer(config):
    return HierarchyRenderer(config)


@pytest.fixture
def sample_lines():
    """Sample triples as a list of raw lines."""
    return SAMPLE_TRIPLES.splitlines()


@pytest.fixture
def sample_forest():
    """Expected default rendering of the sample triples."""
    return list(SAMPLE_FOREST)


@pytest.fixture
def sample_hierarchy(ingestor, sample_lines):
    """Frozen hierarchy built from the sample triples."""
    return ingestor.ingest(sample_lines).freeze()


@pytest.fixture
def triples_file(tmp_path):
    """Sample triples written to a file on disk."""
    path = tmp_path / "ies.rdf"
    path.write_text(SAMPLE_TRIPLES, encoding="utf-8")
    return path


@pytest.fixture
def service(config):
    return HierarchyService(config)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RDF_HIERARCHY_* variables from the outer shell out of tests."""
    for name in (
        "RDF_HIERARCHY_SOURCE",
        "RDF_HIERARCHY_FILTER",
        "RDF_HIERARCHY_MAX_DEPTH",
        "RDF_HIERARCHY_INDENT",
        "RDF_HIERARCHY_PREFIXES",
        "RDF_HIERARCHY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
