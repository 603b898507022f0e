from setuptools import setup, find_packages

setup(
    name="murmurstream",
    version="0.1.0",
    description="Streaming, pure-Python MurmurHash3 digests (x86_32, x86_128, x64_128) with a hashlib-style API, one-shot helpers, columnar helpers and a small CLI.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["murmurstream=murmurstream.cli:main"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
