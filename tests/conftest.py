"""
Shared fixtures for the validator tests.

Run with: pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from pbcore_core.validation.base import FindingSink
from pbcore_core.validation.schema import SchemaRegistry, reset_registry


DC_RECORD = """\
<?xml version="1.0" encoding="UTF-8"?>
<metadata xmlns="http://purl.org/dc/elements/1.1/">
  <title>Evening News</title>
  <creator>Castleman, Mike</creator>
  <subject>Journalism</subject>
  <type>MovingImage</type>
</metadata>
"""

SIMPLE_DC_RECORD = """\
<?xml version="1.0" encoding="UTF-8"?>
<oai_dc:dc xmlns:oai_dc="http://www.openarchives.org/OAI/2.0/oai_dc/"
           xmlns:dc="http://purl.org/dc/elements/1.1/">
  <dc:title>Evening News</dc:title>
  <dc:creator>Castleman, Mike</dc:creator>
</oai_dc:dc>
"""

PBCORE_RECORD = """\
<?xml version="1.0" encoding="UTF-8"?>
<pbcoreDescriptionDocument xmlns="http://www.pbcore.org/PBCore/PBCoreNamespace.html">
  <pbcoreIdentifier>
    <identifier>cpb-001</identifier>
    <identifierSource>Example Station</identifierSource>
  </pbcoreIdentifier>
  <pbcoreTitle>
    <title>Evening News</title>
    <titleType>Series</titleType>
  </pbcoreTitle>
  <pbcoreDescription>
    <description>A nightly news broadcast.</description>
  </pbcoreDescription>
  <pbcoreCreator>
    <creator>Castleman, Mike</creator>
    <creatorRole>Producer</creatorRole>
  </pbcoreCreator>
  <pbcoreInstantiation>
    <pbcoreFormatID>
      <formatIdentifier>tape-1</formatIdentifier>
    </pbcoreFormatID>
    <formatPhysical>Betacam SP</formatPhysical>
    <formatLocation>Archive shelf 4</formatLocation>
  </pbcoreInstantiation>
</pbcoreDescriptionDocument>
"""

PBCORE_WITH_SUGGESTIONS = """\
<?xml version="1.0" encoding="UTF-8"?>
<pbcoreDescriptionDocument xmlns="http://www.pbcore.org/PBCore/PBCoreNamespace.html">
  <pbcoreIdentifier>
    <identifier>cpb-002</identifier>
    <identifierSource>Example Station</identifierSource>
  </pbcoreIdentifier>
  <pbcoreTitle>
    <title>Evening News</title>
  </pbcoreTitle>
  <pbcoreDescription>
    <description>A nightly news broadcast.</description>
  </pbcoreDescription>
  <pbcoreCreator>
    <creator>Mike Castleman</creator>
    <creatorRole>Chief Wizard</creatorRole>
  </pbcoreCreator>
  <pbcoreInstantiation>
    <pbcoreFormatID>
      <formatIdentifier>tape-2</formatIdentifier>
    </pbcoreFormatID>
    <formatPhysical>Betacam SP</formatPhysical>
    <formatDigital>video/mp4</formatDigital>
    <formatLocation>Archive shelf 4</formatLocation>
  </pbcoreInstantiation>
</pbcoreDescriptionDocument>
"""

MALFORMED_RECORD = """\
<?xml version="1.0" encoding="UTF-8"?>
<metadata xmlns="http://purl.org/dc/elements/1.1/">
  <title>Evening News
</metadata>
"""


@pytest.fixture(scope="session")
def registry():
    """Registry over the bundled schemas, shared by the whole session."""
    return SchemaRegistry()


@pytest.fixture(autouse=True)
def isolated_default_registry():
    """Keep tests from leaking a default registry into each other."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def sink():
    """Empty finding sink."""
    return FindingSink()


@pytest.fixture
def dc_record():
    return DC_RECORD


@pytest.fixture
def simple_dc_record():
    return SIMPLE_DC_RECORD


@pytest.fixture
def pbcore_record():
    return PBCORE_RECORD


@pytest.fixture
def pbcore_with_suggestions():
    return PBCORE_WITH_SUGGESTIONS


@pytest.fixture
def malformed_record():
    return MALFORMED_RECORD


@pytest.fixture
def schema_dir(tmp_path):
    """Temporary schema directory holding one trivial XSD per dialect."""
    xsd = (
        '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
        '<xs:element name="record" type="xs:string"/>'
        '</xs:schema>'
    )
    for name in ["dc.xsd", "simple_dc.xsd", "PBCoreXSD_Ver_1-2-1.xsd", "PBCoreXSD-v1.3.xsd"]:
        (tmp_path / name).write_text(xsd, encoding="utf-8")
    return tmp_path
