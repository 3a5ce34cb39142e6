"""Setup script for google-cloud-spannerclient."""
from setuptools import find_namespace_packages, setup

setup(
    name="google-cloud-spannerclient",
    version="0.1.0",
    description="Python client for Cloud Spanner instances and sessions",
    license="Apache 2.0",
    packages=find_namespace_packages(include=["google.*"]),
    install_requires=[
        "google-api-core[grpc]>=2.11.0",
        "google-auth>=2.14.1",
        "google-cloud-spanner>=3.40.0",
        "grpcio>=1.51.0",
        "protobuf>=4.21.0",
    ],
    extras_require={
        "test": [
            "googleapis-common-protos",
            "pytest",
            "pytest-cov",
        ],
    },
    include_package_data=True,
    python_requires=">=3.10",
)
