from setuptools import setup, find_packages
setup(
    name='pirates-client',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'pirates_client': [
            'config/*.yaml',
        ],
    },
    description='Async HTTP client helper for the pirates API.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'httpx>=0.24.0',
        'pydantic>=2.0.0',
        'fastapi>=0.100.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'pirates = pirates_client.cli:program.run',
        ],
        'pytest11': [
            'pirates_client = pirates_client.pytest_plugin',
        ],
    },
)
