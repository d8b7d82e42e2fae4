from setuptools import setup, find_namespace_packages

setup(
    name='AvroPy',
    version='1.0',
    packages=find_namespace_packages(include=['AvroPy', 'AvroPy.*']),
    install_requires=[
        'typeguard>=4',
        'typing_extensions'
    ],
    extras_require={
        'dev': ['mypy', 'pytest'],
    },
    package_data={
        'AvroPy': ['*.pyi', 'py.typed']
    },
    zip_safe=False,  # Required for packages with type hints
)
