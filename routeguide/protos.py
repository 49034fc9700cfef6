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
"""Message and service modules for the route guide contract.

The modules are generated from route_guide.proto at import time, so no
protoc-generated code is checked in.
"""

import os
import sys

import grpc

# NOTE: grpc.protos_and_services resolves the .proto path against sys.path
# entries, so the directory containing this package must be on it. Installed
# copies already satisfy this; only source checkouts need the append.
_PROTO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROTO_ROOT not in sys.path:
    sys.path.append(_PROTO_ROOT)

route_guide_pb2, route_guide_pb2_grpc = grpc.protos_and_services(
    os.path.join("routeguide", "route_guide.proto"))
