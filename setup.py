"""Installation script."""
import setuptools


PACKAGE_NAME = 'qdd'
DESCRIPTION = (
    'N-Queens solved incrementally using '
    'reduced ordered binary decision diagrams '
    'implemented in pure Python.')
LONG_DESCRIPTION = (
    'qdd is a package that represents the rules of '
    'the N-Queens puzzle as a binary decision diagram, '
    'and restricts that diagram as queens are placed. '
    'It includes a pure Python implementation of shared, '
    'reduced ordered binary decision diagrams with '
    'memoized operators, restriction, and model counting. '
    'After each placement, the cells where no queen fits '
    'are blocked, and when a single solution remains, '
    'the board is completed.')
VERSION_FILE = f'{PACKAGE_NAME}/_version.py'
VERSION = '0.1.0'
VERSION_FILE_TEXT = (
    '# This file was generated from setup.py\n'
    "version = '{version}'\n")
PYTHON_REQUIRES = '>=3.11'
INSTALL_REQUIRES = [
    'networkx >= 2.4',
    'setuptools >= 65.6.0']
EXTRAS_REQUIRE = {
    'dot': [
        'pydot >= 1.2.2'],
    'test': [
        'pytest >= 4.6.11']}
CLASSIFIERS = [
    'Development Status :: 2 - Pre-Alpha',
    'Intended Audience :: Developers',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Games/Entertainment :: Puzzle Games']
KEYWORDS = [
    'bdd',
    'binary decision diagram',
    'decision diagram',
    'boolean',
    'n-queens',
    'networkx',
    'dot',
    'graphviz']


def _parse_version(
        version:
            str
        ) -> tuple[
            int, int, int]:
    """Return numeric version."""
    numerals = version.split('.')
    if len(numerals) != 3:
        raise ValueError(numerals)
    return tuple(map(int, numerals))


def run_setup(
        ) -> None:
    """Write version file, install."""
    _parse_version(VERSION)
    s = VERSION_FILE_TEXT.format(version=VERSION)
    with open(VERSION_FILE, 'w') as f:
        f.write(s)
    setuptools.setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        license='BSD',
        python_requires=PYTHON_REQUIRES,
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        packages=[PACKAGE_NAME],
        package_dir={PACKAGE_NAME: PACKAGE_NAME},
        include_package_data=True,
        zip_safe=False,
        classifiers=CLASSIFIERS,
        keywords=KEYWORDS)


if __name__ == '__main__':
    run_setup()
