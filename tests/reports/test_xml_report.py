"""Tests for the XML report."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
import xmlschema

import locc
from locc.cache import CountsCache
from locc.models import Counts, Language
from locc.reports import ReportContext, XmlReport
from locc.reports.xml_report import NAMESPACE, SCHEMA_LOCATION
from tests._fixtures.sample_counts import TIMESTAMP

NS = {"l": NAMESPACE}
XSI_SCHEMA_LOCATION = "{http://www.w3.org/2001/XMLSchema-instance}schemaLocation"


@pytest.fixture(scope="module")
def schema() -> xmlschema.XMLSchema:
    return xmlschema.XMLSchema(str(Path(locc.__file__).parent / "schemas" / "locc-1.xsd"))


def _counts(element: ET.Element) -> tuple[str, str, str, str]:
    return (
        element.get("totalLines"),
        element.get("codeLines"),
        element.get("commentLines"),
        element.get("blankLines"),
    )


def test_xml_report_is_valid_against_schema(
    cache: CountsCache, context: ReportContext, tmp_path: Path, schema: xmlschema.XMLSchema
) -> None:
    content = XmlReport(context, tmp_path).render(cache)

    assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<locc ')
    schema.validate(ET.fromstring(content))


def test_xml_report_root_metadata(
    cache: CountsCache, context: ReportContext, tmp_path: Path
) -> None:
    root = ET.fromstring(XmlReport(context, tmp_path).render(cache))

    assert root.tag == f"{{{NAMESPACE}}}locc"
    assert root.get(XSI_SCHEMA_LOCATION) == SCHEMA_LOCATION
    assert root.get("formatVersion") == "1"
    assert root.get("date") == TIMESTAMP
    assert root.get("projectName") == "demo"
    assert root.get("projectVersion") == "1.2.3"
    assert root.get("numFiles") == "3"
    assert root.get("numUnrecognized") == "1"
    assert root.get("numLanguages") == "2"
    assert _counts(root) == ("28", "20", "5", "3")


def test_xml_report_languages_and_files(
    cache: CountsCache, context: ReportContext, tmp_path: Path
) -> None:
    root = ET.fromstring(XmlReport(context, tmp_path).render(cache))

    languages = root.findall("l:languages/l:language", NS)
    assert [language.get("name") for language in languages] == ["Cpp", "Java"]
    assert languages[0].get("displayName") == "C++"
    assert languages[0].get("website") == "https://isocpp.org/"
    assert _counts(languages[0]) == ("20", "12", "5", "3")

    files = root.findall("l:files/l:file", NS)
    assert [file.get("pathname") for file in files] == [
        "file3.foo",
        "src/file1.cpp",
        "src/file2.java",
    ]
    unrecognized, cpp_file, _ = files
    assert unrecognized.get("unrecognized") == "true"
    assert unrecognized.get("numLanguages") == "0"
    assert unrecognized.findall("l:language", NS) == []
    assert cpp_file.get("unrecognized") is None
    refs = cpp_file.findall("l:language", NS)
    assert [(ref.get("name"), _counts(ref)) for ref in refs] == [("Cpp", ("20", "12", "5", "3"))]
    assert refs[0].get("displayName") is None


def test_xml_report_escapes_and_omits_attributes(
    context: ReportContext, tmp_path: Path, schema: xmlschema.XMLSchema
) -> None:
    odd = Language(name="Odd", display_name='A & "B" <C>\x01', description=None)
    cache = CountsCache({Path("odd & end.x"): {odd: Counts(1, 0, 0)}})

    content = XmlReport(context, tmp_path).render(cache)
    root = ET.fromstring(content)
    language = root.find("l:languages/l:language", NS)

    assert language.get("displayName") == 'A & "B" <C>'
    assert "description" not in language.attrib
    assert "website" not in language.attrib
    assert root.find("l:files/l:file", NS).get("pathname") == "odd & end.x"
    schema.validate(root)


def test_xml_report_empty_snapshot_is_valid(
    context: ReportContext, tmp_path: Path, schema: xmlschema.XMLSchema
) -> None:
    root = ET.fromstring(XmlReport(context, tmp_path).render(CountsCache({})))

    assert root.findall("l:languages/l:language", NS) == []
    assert root.get("numFiles") == "0"
    schema.validate(root)


def test_xml_report_is_default_enabled(context: ReportContext, tmp_path: Path) -> None:
    report = XmlReport(context, tmp_path)
    assert report.enabled is True
    assert report.output_path == tmp_path / "locc.xml"
