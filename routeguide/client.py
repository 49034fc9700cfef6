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
"""The Python AsyncIO implementation of the gRPC route guide client."""

import argparse
import asyncio
import logging
import random
from typing import Iterable, Sequence

import grpc

from routeguide import geo
from routeguide import resources
from routeguide.protos import route_guide_pb2
from routeguide.protos import route_guide_pb2_grpc

_DEFAULT_TARGET = "localhost:50051"
_DESCRIPTION = "A client exercising every route guide RPC."

_ROUTE_LENGTH = 10


def make_route_note(message: str, latitude: int,
                    longitude: int) -> route_guide_pb2.RouteNote:
    return route_guide_pb2.RouteNote(
        message=message,
        location=route_guide_pb2.Point(latitude=latitude, longitude=longitude),
    )


# Performs an unary call
async def guide_get_one_feature(
        stub: route_guide_pb2_grpc.RouteGuideStub,
        point: route_guide_pb2.Point) -> route_guide_pb2.Feature:
    feature = await stub.GetFeature(point)
    if feature.name:
        print(f"Found feature {feature.name!r} at {geo.format_point(point)}")
    else:
        print(f"No feature found at {geo.format_point(point)}")
    return feature


async def guide_get_feature(stub: route_guide_pb2_grpc.RouteGuideStub) -> None:
    # Both lookups are in flight at the same time.
    await asyncio.gather(
        guide_get_one_feature(
            stub,
            route_guide_pb2.Point(latitude=409146138, longitude=-746188906)),
        guide_get_one_feature(stub,
                              route_guide_pb2.Point(latitude=0, longitude=0)),
    )


# Performs a server-streaming call
async def guide_list_features(
        stub: route_guide_pb2_grpc.RouteGuideStub
) -> Sequence[route_guide_pb2.Feature]:
    rectangle = route_guide_pb2.Rectangle(
        lo=route_guide_pb2.Point(latitude=400000000, longitude=-750000000),
        hi=route_guide_pb2.Point(latitude=420000000, longitude=-730000000),
    )
    print(f"Searching features between {geo.format_point(rectangle.lo)} "
          f"and {geo.format_point(rectangle.hi)}")

    features = []
    async for feature in stub.ListFeatures(rectangle):
        print(f"Found feature {feature.name!r} at "
              f"{geo.format_point(feature.location)}")
        features.append(feature)
    return features


def generate_route(
    feature_db: Sequence[route_guide_pb2.Feature]
) -> Iterable[route_guide_pb2.Point]:
    for _ in range(_ROUTE_LENGTH):
        random_feature = random.choice(feature_db)
        print(f"Visiting point {geo.format_point(random_feature.location)}")
        yield random_feature.location


# Performs a client-streaming call
async def guide_record_route(
        stub: route_guide_pb2_grpc.RouteGuideStub,
        feature_db: Sequence[route_guide_pb2.Feature]
) -> route_guide_pb2.RouteSummary:
    # gRPC AsyncIO client-streaming RPC API accepts both synchronous iterables
    # and async iterables.
    route_summary = await stub.RecordRoute(generate_route(feature_db))
    print("Finished trip, route summary:")
    print(f"\tVisited {route_summary.point_count} points")
    print(f"\tPassed {route_summary.feature_count} features")
    print(f"\tTravelled {route_summary.distance} meters")
    print(f"\tTook {route_summary.elapsed_time} seconds")
    return route_summary


def generate_messages() -> Iterable[route_guide_pb2.RouteNote]:
    messages = [
        make_route_note("First message", 0, 0),
        make_route_note("Second message", 0, 1),
        make_route_note("Third message", 1, 0),
        make_route_note("Fourth message", 0, 0),
    ]
    for msg in messages:
        print(f"Sending {msg.message} at {geo.format_point(msg.location)}")
        yield msg


# Performs a bidi-streaming call
async def guide_route_chat(
    stub: route_guide_pb2_grpc.RouteGuideStub
) -> Sequence[route_guide_pb2.RouteNote]:
    received = []
    async for response in stub.RouteChat(generate_messages()):
        print(f"Received message {response.message} at "
              f"{geo.format_point(response.location)}")
        received.append(response)
    return received


async def run(target: str) -> None:
    feature_db = resources.read_route_guide_database()
    async with grpc.aio.insecure_channel(target) as channel:
        stub = route_guide_pb2_grpc.RouteGuideStub(channel)
        print("-------------- GetFeature --------------")
        await guide_get_feature(stub)
        print("-------------- ListFeatures --------------")
        await guide_list_features(stub)
        print("-------------- RecordRoute --------------")
        await guide_record_route(stub, feature_db)
        print("-------------- RouteChat --------------")
        await guide_route_chat(stub)


def main() -> None:
    parser = argparse.ArgumentParser(description=_DESCRIPTION)
    parser.add_argument(
        "--target",
        default=_DEFAULT_TARGET,
        help="The address of the route guide server.",
    )
    args = parser.parse_args()
    asyncio.run(run(args.target))


if __name__ == "__main__":
    logging.basicConfig()
    main()
