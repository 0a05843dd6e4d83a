import os
import re

from setuptools import setup

long_description = """
A kill policy for resource pressure response.  When asked to act, it
ranks the monitored cgroups by how much io cost they generate, skips
sibling cgroups outside of the configured set, and kills the most
expensive cgroup that can be killed.  After a kill it holds off for a
configurable delay, giving the system time to recover before anything
else gets killed.

The command line tool evaluates the policy in dry mode against a
snapshot file, showing which cgroup would have been killed.
"""

module = 'kill_iocost'

basedir = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(basedir, '%s.py' % module)) as f:
    _moduletext = f.read()

def readmeta(fieldname):
    return re.search(r'__%s__\s*=\s*"(.*)"' % re.escape(fieldname), _moduletext).group(1).strip()

setup(
    name='kill-iocost',
    version=readmeta('version'),
    description='Kill policy picking the cgroup with the highest io cost generation rate',
    long_description=long_description.strip(),
    license='GPLv3+',
    url='https://github.com/tobixen/thrash-protect',

    author=readmeta('author'),
    author_email=readmeta('email'),

    py_modules=[module],
    zip_safe=False,
    include_package_data=True,
    python_requires='>=3.8',

    install_requires=[
        'PyYAML',
        'tomli; python_version < "3.11"',
    ],
    extras_require=dict(
        build=['twine', 'wheel', 'setuptools-git'],
        test=['pytest'],
    ),

    entry_points={
        "console_scripts": ['kill-iocost=%s:main' % module]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Topic :: Utilities",
        "Topic :: System :: Systems Administration",
        "Programming Language :: Python :: 3",
    ],
)
