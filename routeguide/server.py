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
"""The Python AsyncIO implementation of the gRPC route guide server."""

import argparse
import asyncio
import contextlib
import logging
import time
from typing import AsyncIterable, Tuple

import grpc

from routeguide import _streaming
from routeguide import chat
from routeguide import geo
from routeguide import resources
from routeguide.protos import route_guide_pb2
from routeguide.protos import route_guide_pb2_grpc

_LOGGER = logging.getLogger(__name__)

_DEFAULT_ADDRESS = "[::]:50051"
_DESCRIPTION = "A server answering route guide queries over gRPC."

# How many Features ListFeatures may buffer ahead of the client.
_LIST_FEATURES_BUFFER_SIZE = 4

_GRACE_PERIOD_SECONDS = 5

# RouteSummary fields are int32; longer routes report this distance.
_INT32_MAX = 2**31 - 1


class RouteGuideServicer(route_guide_pb2_grpc.RouteGuideServicer):
    """Provides methods that implement functionality of route guide server."""

    def __init__(self, feature_db: resources.FeatureDatabase) -> None:
        self._db = feature_db

    async def GetFeature(
            self, request: route_guide_pb2.Point,
            unused_context: grpc.aio.ServicerContext
    ) -> route_guide_pb2.Feature:
        feature = self._db.find_named(request)
        if feature is None:
            # An empty Feature, not an error status, signals absence.
            return route_guide_pb2.Feature()
        return feature

    async def ListFeatures(
        self, request: route_guide_pb2.Rectangle,
        unused_context: grpc.aio.ServicerContext
    ) -> AsyncIterable[route_guide_pb2.Feature]:
        _LOGGER.debug("Listing features between %s and %s",
                      geo.format_point(request.lo),
                      geo.format_point(request.hi))
        features = _streaming.bounded(self._db.within(request),
                                      _LIST_FEATURES_BUFFER_SIZE)
        try:
            async with contextlib.aclosing(features):
                async for feature in features:
                    yield feature
        except asyncio.CancelledError:
            _LOGGER.info("ListFeatures cancelled, scan stopped.")
            raise

    async def RecordRoute(
            self, request_iterator: AsyncIterable[route_guide_pb2.Point],
            unused_context: grpc.aio.ServicerContext
    ) -> route_guide_pb2.RouteSummary:
        point_count = 0
        feature_count = 0
        distance = 0
        prev_point = None

        start_time = time.monotonic()
        async for point in request_iterator:
            point_count += 1
            feature_count += self._db.count_at(point)
            if prev_point is not None:
                distance = min(distance + geo.get_distance(prev_point, point),
                               _INT32_MAX)
            prev_point = point

        elapsed_time = time.monotonic() - start_time
        _LOGGER.debug("Recorded a route of %d points", point_count)
        return route_guide_pb2.RouteSummary(point_count=point_count,
                                            feature_count=feature_count,
                                            distance=distance,
                                            elapsed_time=int(elapsed_time))

    async def RouteChat(
        self, request_iterator: AsyncIterable[route_guide_pb2.RouteNote],
        context: grpc.aio.ServicerContext
    ) -> AsyncIterable[route_guide_pb2.RouteNote]:
        router = chat.RouteNoteRouter()
        try:
            async for new_note in request_iterator:
                if not new_note.HasField("location"):
                    await context.abort(grpc.StatusCode.INVALID_ARGUMENT,
                                        "RouteNote has no location")
                for note in router.route(new_note):
                    yield note
        except asyncio.CancelledError:
            _LOGGER.info("RouteChat cancelled after %d locations.", len(router))
            raise


def create_server(
        address: str,
        feature_db: resources.FeatureDatabase) -> Tuple[grpc.aio.Server, int]:
    server = grpc.aio.server()
    route_guide_pb2_grpc.add_RouteGuideServicer_to_server(
        RouteGuideServicer(feature_db), server)
    port = server.add_insecure_port(address)
    return server, port


async def serve(address: str, feature_db: resources.FeatureDatabase) -> None:
    server, _ = create_server(address, feature_db)
    await server.start()
    _LOGGER.info("Serving %d features on %s", len(feature_db), address)
    try:
        await server.wait_for_termination()
    finally:
        _LOGGER.info("Shutting down with a grace period of %d seconds",
                     _GRACE_PERIOD_SECONDS)
        await server.stop(_GRACE_PERIOD_SECONDS)


def main() -> None:
    parser = argparse.ArgumentParser(description=_DESCRIPTION)
    parser.add_argument(
        "--address",
        default=_DEFAULT_ADDRESS,
        help="The address on which the server will listen.",
    )
    args = parser.parse_args()
    try:
        feature_db = resources.read_route_guide_database()
    except resources.LoadError:
        _LOGGER.exception("Refusing to serve without a feature database.")
        raise SystemExit(1)
    asyncio.run(serve(args.address, feature_db))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
