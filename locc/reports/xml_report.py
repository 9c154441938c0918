"""Line count report in XML format."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

from ..cache import CountsCache
from ..models import Counts, Language
from .base import FORMAT_VERSION, LoccReport
from .escaping import escape_xml

NAMESPACE = "urn:locc:report:1"
SCHEMA_LOCATION = f"{NAMESPACE} locc-1.xsd"
_XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"

ET.register_namespace("", NAMESPACE)
ET.register_namespace("xsi", _XSI_NAMESPACE)


def _tag(name: str) -> str:
    return f"{{{NAMESPACE}}}{name}"


class XmlReport(LoccReport):
    """Writes a namespaced document valid against ``locc-1.xsd``."""

    name = "xml"
    display_name = "Report in XML format"
    extension = "xml"
    default_enabled = True

    def render(self, cache: CountsCache) -> str:
        root = ET.Element(_tag("locc"))
        root.set(f"{{{_XSI_NAMESPACE}}}schemaLocation", SCHEMA_LOCATION)
        _set(root, "formatVersion", str(FORMAT_VERSION))
        _set(root, "date", self.context.timestamp())
        _set(root, "projectName", self.context.project_name)
        _set(root, "projectVersion", self.context.project_version)
        _set(root, "numFiles", str(len(cache.path_counts)))
        _set(root, "numUnrecognized", str(len(cache.unrecognized)))
        _set(root, "numLanguages", str(len(cache.languages)))
        _set_counts(root, cache.total_counts)

        languages = ET.SubElement(root, _tag("languages"))
        for language in cache.sorted_languages():
            element = _language_element(languages, language)
            _set(element, "displayName", language.display_name)
            _set(element, "description", language.description)
            _set(element, "website", language.website)
            _set_counts(element, cache.language_counts[language])

        files = ET.SubElement(root, _tag("files"))
        for path in cache.sorted_paths():
            language_counts = cache.path_counts[path]
            element = ET.SubElement(files, _tag("file"))
            _set(element, "pathname", self.context.pathname(path))
            _set(element, "numLanguages", str(len(language_counts)))
            unrecognized = path in cache.unrecognized
            if unrecognized:
                _set(element, "unrecognized", "true")
            _set_counts(element, cache.counts_for(path))
            if unrecognized:
                continue
            for language in cache.languages_for(path):
                ref = _language_element(element, language)
                _set_counts(ref, language_counts[language])

        ET.indent(root, space="    ")
        body = ET.tostring(root, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def _language_element(parent: ET.Element, language: Language) -> ET.Element:
    element = ET.SubElement(parent, _tag("language"))
    _set(element, "name", language.name)
    return element


def _set(element: ET.Element, name: str, value: Optional[str]) -> None:
    if value is not None:
        element.set(name, escape_xml(value))


def _set_counts(element: ET.Element, counts: Counts) -> None:
    _set(element, "totalLines", str(counts.total))
    _set(element, "codeLines", str(counts.code))
    _set(element, "commentLines", str(counts.comment))
    _set(element, "blankLines", str(counts.blank))


__all__ = ["NAMESPACE", "SCHEMA_LOCATION", "XmlReport"]
