# Copyright 2026 The gRPC Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Common resources used in the gRPC route guide example."""

import collections.abc
import json
import logging
import os
from typing import Iterable, Iterator, Optional

from routeguide import geo
from routeguide.protos import route_guide_pb2

_LOGGER = logging.getLogger(__name__)

_DEFAULT_DATABASE_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "route_guide_db.json")

_INT32_MIN = -2**31
_INT32_MAX = 2**31 - 1


class LoadError(Exception):
    """Raised when the route guide database cannot be read."""


class FeatureDatabase(collections.abc.Sequence):
    """An immutable, ordered collection of route_guide_pb2.Features.

    The database is built once and then only read, so a single instance can
    be shared by any number of concurrent calls without locking.
    """

    def __init__(self, features: Iterable[route_guide_pb2.Feature]) -> None:
        self._features = tuple(features)

    def __getitem__(self, index):
        return self._features[index]

    def __iter__(self) -> Iterator[route_guide_pb2.Feature]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def lookup_exact(
            self,
            point: route_guide_pb2.Point) -> Optional[route_guide_pb2.Feature]:
        """Returns the first Feature located exactly at point, or None."""
        for feature in self._features:
            if feature.location == point:
                return feature
        return None

    def count_at(self, point: route_guide_pb2.Point) -> int:
        """Number of Features located exactly at point, named or not."""
        return sum(1 for feature in self._features if feature.location == point)

    def find_named(
            self,
            point: route_guide_pb2.Point) -> Optional[route_guide_pb2.Feature]:
        """Like lookup_exact, but an unnamed Feature counts as no Feature."""
        feature = self.lookup_exact(point)
        if feature is None or not feature.name:
            return None
        return feature

    def within(
        self, rect: route_guide_pb2.Rectangle
    ) -> Iterator[route_guide_pb2.Feature]:
        """Yields the named Features inside rect, in database order."""
        for feature in self._features:
            if feature.name and geo.in_range(feature.location, rect):
                yield feature


def _coordinate(location, field, index):
    value = location.get(field)
    # bool is an int subclass and never a valid coordinate.
    if not isinstance(value, int) or isinstance(value, bool):
        raise LoadError("Feature #{}: location.{} must be an integer".format(
            index, field))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise LoadError("Feature #{}: location.{} is out of range: {}".format(
            index, field, value))
    return value


def _parse_feature(item, index):
    if not isinstance(item, dict):
        raise LoadError("Feature #{} is not an object".format(index))
    name = item.get("name")
    if not isinstance(name, str):
        raise LoadError("Feature #{}: name must be a string".format(index))
    location = item.get("location")
    if not isinstance(location, dict):
        raise LoadError("Feature #{}: location must be an object".format(index))
    return route_guide_pb2.Feature(
        name=name,
        location=route_guide_pb2.Point(
            latitude=_coordinate(location, "latitude", index),
            longitude=_coordinate(location, "longitude", index)))


def read_route_guide_database(path: Optional[str] = None) -> FeatureDatabase:
    """Reads the route guide database.

    Args:
      path: The JSON file to read. Either a list of features or an object
        holding that list under the "feature" key. Defaults to the database
        bundled with this package.

    Returns:
      The full contents of the route guide database as a FeatureDatabase.

    Raises:
      LoadError: The file is missing, is not JSON, or holds a malformed
        feature. Nothing is returned in that case.
    """
    if path is None:
        path = _DEFAULT_DATABASE_PATH
    try:
        with open(path) as route_guide_db_file:
            document = json.load(route_guide_db_file)
    except OSError as e:
        raise LoadError("Cannot read {}: {}".format(path, e)) from e
    except ValueError as e:
        raise LoadError("{} is not valid JSON: {}".format(path, e)) from e

    if isinstance(document, dict):
        document = document.get("feature")
    if not isinstance(document, list):
        raise LoadError("{} does not hold a list of features".format(path))

    feature_db = FeatureDatabase(
        _parse_feature(item, index) for index, item in enumerate(document))
    _LOGGER.debug("Loaded %d features from %s", len(feature_db), path)
    return feature_db
