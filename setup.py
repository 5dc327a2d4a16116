from setuptools import setup, find_packages

VERSION = "0.1.0"

def readme():
    readme_short = """
    ghorg binds the organization role endpoints of the GitHub REST API:
    listing organization roles, assigning them to teams and users, and
    managing the teams that hold the ``security_manager`` role.

    """
    return readme_short

setup(
    name="ghorg",
    version=VERSION,
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='GitHub organization role bindings',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.7',
    keywords='github organizations roles',
    install_requires=[
        'appdirs>=1.4.0',
        'requests>=2.12.4',
        'ruamel.yaml>=0.15.70',
    ],
    extras_require={
        'tests': [
            'pytest',
            'pytest-cov',
            'responses>=0.17.0',
        ],
    },
    include_package_data=True,
)
