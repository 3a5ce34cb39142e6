#  Copyright 2025 Google LLC
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
import os

from google.api_core.exceptions import GoogleAPICallError

from google.cloud.spannerclient import SpannerClient, SpannerError

PROJECT_ID = os.environ.get("SPANNER_PROJECT_ID", "test-project")
INSTANCE_ID = os.environ.get("SPANNER_INSTANCE_ID", "test-instance")
DATABASE_ID = os.environ.get("SPANNER_DATABASE_ID", "test-db")


def run_quickstart(project_id, instance_id, database_id):
    try:
        with SpannerClient(project_id=project_id) as client:
            for config in client.configurations():
                print(f"Config: {config.name()}")

            session = client.session_client().create(instance_id, database_id)
            if session is None:
                print("No session was created")
                return
            print(f"Successfully created session: {session.name()}")
            session.delete()
    except (GoogleAPICallError, SpannerError) as e:
        print(f"Error talking to Spanner: {e}")


if __name__ == "__main__":
    run_quickstart(PROJECT_ID, INSTANCE_ID, DATABASE_ID)
