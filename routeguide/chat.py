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
"""Per-call note history for the RouteChat RPC."""

import collections
from typing import List, MutableMapping, Tuple

from routeguide import geo
from routeguide.protos import route_guide_pb2


class RouteNoteRouter(object):
    """Collects the RouteNotes of one chat, grouped by location.

    Every note routed to a location is answered with all notes recorded at
    that location so far, the new one included, in arrival order. A router
    belongs to a single call and is dropped with it.
    """
    _notes: MutableMapping[Tuple[int, int], List[route_guide_pb2.RouteNote]]

    def __init__(self) -> None:
        self._notes = collections.defaultdict(list)

    def route(
        self, note: route_guide_pb2.RouteNote
    ) -> Tuple[route_guide_pb2.RouteNote, ...]:
        notes = self._notes[geo.point_key(note.location)]
        notes.append(note)
        return tuple(notes)

    def notes_at(
        self, point: route_guide_pb2.Point
    ) -> Tuple[route_guide_pb2.RouteNote, ...]:
        return tuple(self._notes.get(geo.point_key(point), ()))

    def __len__(self) -> int:
        return len(self._notes)
