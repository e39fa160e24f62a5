from setuptools import setup

setup(name="authtag",
      version="1.0.0",
      description="SHA-1 digests and HMAC-SHA1 authentication tags",
      python_requires=">=3.9",
      packages=["authtag"],
      package_data={"authtag": ["py.typed"]},
      include_package_data=True,
      install_requires=["structlog>=23.1"],
      extras_require={"test": ["pytest>=7.0"]}
)
