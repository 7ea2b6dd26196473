from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()
packages = find_packages(exclude=["test", "test.*"])
setup_args = dict(name='fieldwork',
                  version='0.1.0',
                  description='Shell convenience functions for exploring loosely-typed records',
                  long_description=long_description,
                  long_description_content_type="text/markdown",
                  license='MIT',
                  packages=packages,
                  keywords=['shell', 'records', 'ini', 'template'],
                  install_requires=['more-termcolor', 'click',
                                    'pygments', 'fuzzysearch', 'rich'],
                  # pip install -e .[dev]
                  extras_require={
                      'dev': ['pytest']
                      },
                  entry_points={
                      'console_scripts': ['fieldwork=fieldwork.cli:main'],
                      },
                  python_requires='>=3.11',
                  )
setup(**setup_args)
