from setuptools import setup, find_packages

setup(
    name='sparql-client',
    version='0.1.0',
    description='SPARQL 1.0/1.1 Protocol client with rdflib result decoding',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["test_sparqlclient", "test_sparqlclient.*"]),
    entry_points={
        'console_scripts': [
            'sparql-client=sparqlclient.cmd.sparql_cmd:main',
        ],
    },

    license='Apache License 2.0',
    install_requires=[
        "rdflib>=7.0.0",
        "httpx>=0.26",
        "pydantic>=2.0",
        "PyYAML",
        'tabulate',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
