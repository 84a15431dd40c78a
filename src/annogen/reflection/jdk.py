# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Well-known JDK type declarations preloaded into the in-memory host.

Only the erased supertype edges are recorded; they are enough for the
collection and map subtype tests and for namespace lookups of common types.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############

# Qualified name -> (declaration kind, direct supertypes).
JDK_TYPES: dict[str, tuple[str, tuple[str, ...]]] = {
    # java.lang
    "java.lang.Object": ("class", ()),
    "java.lang.Comparable": ("interface", ()),
    "java.lang.CharSequence": ("interface", ()),
    "java.lang.Iterable": ("interface", ()),
    "java.lang.Cloneable": ("interface", ()),
    "java.lang.Number": ("class", ("java.lang.Object",)),
    "java.lang.String": ("class", ("java.lang.Object", "java.lang.CharSequence", "java.lang.Comparable")),
    "java.lang.Boolean": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.lang.Character": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.lang.Byte": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Short": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Integer": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Long": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Float": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Double": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.lang.Enum": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.lang.Throwable": ("class", ("java.lang.Object",)),
    # java.util collections
    "java.util.Iterator": ("interface", ()),
    "java.util.ListIterator": ("interface", ("java.util.Iterator",)),
    "java.util.Collection": ("interface", ("java.lang.Iterable",)),
    "java.util.List": ("interface", ("java.util.Collection",)),
    "java.util.Set": ("interface", ("java.util.Collection",)),
    "java.util.SortedSet": ("interface", ("java.util.Set",)),
    "java.util.NavigableSet": ("interface", ("java.util.SortedSet",)),
    "java.util.Queue": ("interface", ("java.util.Collection",)),
    "java.util.Deque": ("interface", ("java.util.Queue",)),
    "java.util.AbstractCollection": ("class", ("java.lang.Object", "java.util.Collection")),
    "java.util.AbstractList": ("class", ("java.util.AbstractCollection", "java.util.List")),
    "java.util.AbstractSet": ("class", ("java.util.AbstractCollection", "java.util.Set")),
    "java.util.ArrayList": ("class", ("java.util.AbstractList", "java.util.List", "java.lang.Cloneable")),
    "java.util.LinkedList": ("class", ("java.util.AbstractList", "java.util.List", "java.util.Deque")),
    "java.util.ArrayDeque": ("class", ("java.util.AbstractCollection", "java.util.Deque")),
    "java.util.HashSet": ("class", ("java.util.AbstractSet", "java.util.Set")),
    "java.util.LinkedHashSet": ("class", ("java.util.HashSet", "java.util.Set")),
    "java.util.TreeSet": ("class", ("java.util.AbstractSet", "java.util.NavigableSet")),
    # java.util maps
    "java.util.Map": ("interface", ()),
    "java.util.Map.Entry": ("interface", ()),
    "java.util.SortedMap": ("interface", ("java.util.Map",)),
    "java.util.NavigableMap": ("interface", ("java.util.SortedMap",)),
    "java.util.AbstractMap": ("class", ("java.lang.Object", "java.util.Map")),
    "java.util.HashMap": ("class", ("java.util.AbstractMap", "java.util.Map")),
    "java.util.LinkedHashMap": ("class", ("java.util.HashMap", "java.util.Map")),
    "java.util.TreeMap": ("class", ("java.util.AbstractMap", "java.util.NavigableMap")),
    "java.util.concurrent.ConcurrentMap": ("interface", ("java.util.Map",)),
    "java.util.concurrent.ConcurrentHashMap": ("class", ("java.util.AbstractMap", "java.util.concurrent.ConcurrentMap")),
    # misc value types
    "java.util.Date": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.util.UUID": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.util.Optional": ("class", ("java.lang.Object",)),
    "java.math.BigDecimal": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.math.BigInteger": ("class", ("java.lang.Number", "java.lang.Comparable")),
    "java.time.Instant": ("class", ("java.lang.Object", "java.lang.Comparable")),
    "java.time.LocalDate": ("class", ("java.lang.Object", "java.lang.Comparable")),
}
