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
"""Geometry helpers over route guide Points and Rectangles."""

import math
from typing import Tuple

from routeguide.protos import route_guide_pb2

_COORD_FACTOR = 10000000.0
_EARTH_RADIUS = 6371000  # metres


def point_key(point: route_guide_pb2.Point) -> Tuple[int, int]:
    """Returns a hashable identity for a Point.

    Protobuf messages are unhashable; two points are the same place exactly
    when both raw fields are equal, so both go into the key.
    """
    return point.latitude, point.longitude


def format_point(point: route_guide_pb2.Point) -> str:
    # not delegating in point.__str__ because it is an empty string when its
    # values are zero. In addition, it puts a newline between the fields.
    return "({}, {})".format(point.latitude / _COORD_FACTOR,
                             point.longitude / _COORD_FACTOR)


def in_range(point: route_guide_pb2.Point,
             rect: route_guide_pb2.Rectangle) -> bool:
    """Whether point lies inside rect, borders included.

    The corners of rect may be given in any order.
    """
    left = min(rect.lo.longitude, rect.hi.longitude)
    right = max(rect.lo.longitude, rect.hi.longitude)
    top = max(rect.lo.latitude, rect.hi.latitude)
    bottom = min(rect.lo.latitude, rect.hi.latitude)
    return (left <= point.longitude <= right and
            bottom <= point.latitude <= top)


def get_distance(start: route_guide_pb2.Point,
                 end: route_guide_pb2.Point) -> int:
    """Great-circle distance between two points, in whole metres.

    Uses the haversine formula; the result is truncated, not rounded.
    """
    lat_rad_1 = math.radians(start.latitude / _COORD_FACTOR)
    lat_rad_2 = math.radians(end.latitude / _COORD_FACTOR)
    lon_rad_1 = math.radians(start.longitude / _COORD_FACTOR)
    lon_rad_2 = math.radians(end.longitude / _COORD_FACTOR)
    delta_lat_rad = lat_rad_2 - lat_rad_1
    delta_lon_rad = lon_rad_2 - lon_rad_1

    # Formula is based on http://mathforum.org/library/drmath/view/51879.html
    a = (pow(math.sin(delta_lat_rad / 2), 2) +
         (math.cos(lat_rad_1) * math.cos(lat_rad_2) *
          pow(math.sin(delta_lon_rad / 2), 2)))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return int(_EARTH_RADIUS * c)
