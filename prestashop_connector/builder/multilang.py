"""
Multi-Language Builder - Translatable attributes (name, meta_title, link_rewrite...)

A translatable attribute holds one value per shop language and is sent as:

    <name>
        <language id="1">Shoe</language>
        <language id="2">Chaussure</language>
    </name>
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


@dataclass
class Translation:
    """One language's text for a translatable attribute"""

    language_id: str
    value: str = ""


@dataclass
class TranslatableField:
    """All translations of one attribute, in insertion order"""

    translations: List[Translation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslatableField":
        """
        Build from host parameters

        Accepts {"translations": [{"id": 1, "value": "Shoe"}, ...]}
        ("language_id" is accepted in place of "id").
        """
        translations = []
        for item in data.get("translations") or []:
            language_id = item.get("language_id", item.get("id"))
            if language_id in (None, ""):
                logger.warning(f"Skipping translation without language: {item}")
                continue
            value = item.get("value")
            translations.append(
                Translation(str(language_id), "" if value is None else str(value))
            )
        return cls(translations)

    @classmethod
    def from_template(cls, value: Any) -> "TranslatableField":
        """Build from a blank-schema language list: [{"id": "1", "value": ""}]"""
        return cls(
            [Translation(str(item.get("id")), str(item.get("value") or "")) for item in value]
        )

    @staticmethod
    def is_template_value(value: Any) -> bool:
        """True for blank-schema language lists"""
        return (
            isinstance(value, list)
            and len(value) > 0
            and all(isinstance(item, dict) and set(item.keys()) == {"id", "value"} for item in value)
        )

    @staticmethod
    def is_translatable_param(value: Any) -> bool:
        """True for host parameters shaped like {"translations": [...]}"""
        return isinstance(value, dict) and isinstance(value.get("translations"), list)

    def __len__(self) -> int:
        return len(self.translations)


def append_language_elements(parent: ET.Element, translatable: TranslatableField) -> ET.Element:
    """Append one <language id="..."> child per translation"""
    for translation in translatable.translations:
        language = ET.SubElement(parent, "language", {"id": translation.language_id})
        language.text = translation.value
    return parent


def build_multilang_element(translatable: TranslatableField, tag_name: str) -> ET.Element:
    """Build the <tag_name><language id="..">..</language>...</tag_name> element"""
    return append_language_elements(ET.Element(tag_name), translatable)


def format_multilang_field(translatable: TranslatableField, tag_name: str) -> str:
    """Same as build_multilang_element, serialized (text is XML-escaped)"""
    return ET.tostring(build_multilang_element(translatable, tag_name), encoding="unicode")
