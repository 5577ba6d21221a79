"""Tests for clone-kind classification."""

import datetime
import re
import threading
from collections import OrderedDict, defaultdict, namedtuple
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from fractions import Fraction
from types import SimpleNamespace
from xml.dom import minidom
from xml.etree import ElementTree

import pytest

from structclone import CloneKind, classify, type_tag
from structclone.core.kinds import solid_base


class Color(Enum):
    RED = 1


class Level(IntEnum):
    LOW = 1


class Name(str):
    pass


class Plain:
    def __init__(self):
        self.x = 1


class Slotted:
    __slots__ = ("a", "b")


@dataclass(frozen=True, slots=True)
class Frozen:
    value: int


class Failure(Exception):
    pass


class Handler:
    def __call__(self, event):
        return event


Point = namedtuple("Point", "x y")


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        0,
        1.5,
        2j,
        "s",
        b"b",
        range(3),
        ...,
        NotImplemented,
        Decimal("1.1"),
        Fraction(1, 3),
        Color.RED,
        Level.LOW,
    ],
)
def test_primitives(value):
    assert classify(value) is CloneKind.PRIMITIVE


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (Name("x"), CloneKind.BOXED),
        (bytearray(b"ab"), CloneKind.BOXED),
        (datetime.datetime(2024, 1, 1), CloneKind.TEMPORAL),
        (datetime.date(2024, 1, 1), CloneKind.TEMPORAL),
        (datetime.time(12, 0), CloneKind.TEMPORAL),
        (datetime.timedelta(days=1), CloneKind.TEMPORAL),
        (re.compile("ab"), CloneKind.PATTERN),
        ([], CloneKind.SEQUENCE),
        ((1, 2), CloneKind.TUPLE),
        (Point(1, 2), CloneKind.TUPLE),
        ({}, CloneKind.MAPPING),
        (OrderedDict(), CloneKind.MAPPING),
        (defaultdict(list), CloneKind.MAPPING),
        ({1}, CloneKind.SET),
        (frozenset({1}), CloneKind.SET),
        (Plain(), CloneKind.RECORD),
        (Slotted(), CloneKind.RECORD),
        (Frozen(1), CloneKind.RECORD),
        (SimpleNamespace(a=1), CloneKind.RECORD),
        (object(), CloneKind.RECORD),
    ],
)
def test_composites(value, kind):
    assert classify(value) is kind


@pytest.mark.parametrize(
    "value",
    [
        lambda: None,
        len,
        print,
        Plain().__init__,
        Plain,
        threading.Lock(),
        iter([]),
        (x for x in ()),
        Failure("boom"),
        re,
        Handler(),
    ],
)
def test_unknown(value):
    """Callables, classes, handles and modules have no built-in rule."""
    assert classify(value) is CloneKind.UNKNOWN


def test_nodes_match_tag_and_native_clone():
    doc = minidom.parseString("<root><child/></root>")

    assert classify(doc.documentElement) is CloneKind.NODE
    assert classify(ElementTree.Element("x")) is CloneKind.NODE


def test_node_path_can_be_disabled():
    element = minidom.parseString("<root/>").documentElement

    assert classify(element, node_pattern=None) is CloneKind.RECORD
    assert classify(ElementTree.Element("x"), node_pattern=None) is CloneKind.UNKNOWN


def test_element_name_without_native_clone_is_a_record():
    class FormElement:
        pass

    assert classify(FormElement()) is CloneKind.RECORD


def test_collection_kinds():
    collections = {kind for kind in CloneKind if kind.is_collection}

    assert collections == {
        CloneKind.SEQUENCE,
        CloneKind.MAPPING,
        CloneKind.SET,
        CloneKind.RECORD,
    }


def test_solid_base():
    assert solid_base(Plain) is object
    assert solid_base(Failure) is Exception
    assert solid_base(SimpleNamespace) is SimpleNamespace


def test_type_tag():
    assert type_tag(lambda: None) == "builtins.function"
    assert type_tag(Plain()) == f"{__name__}.Plain"
