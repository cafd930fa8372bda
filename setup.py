# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from glob import glob
from setuptools import setup, find_packages

NAME = "droidbuild"
VERSION = "1.0"  # used only outside of a git checkout.

SCRIPTS = glob("bin/*")


setup(
    name=NAME,
    packages=find_packages(exclude=("tests.*", "tests")),
    package_data={"droidbuild": ["*.yaml"]},
    scripts=SCRIPTS,
    use_scm_version={"fallback_version": VERSION},
    python_requires=">=3.8",

    license='Apache 2.0',
    description='Run Gradle tasks that assemble, build and install Android apps.',
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    install_requires=[
        'blinker',
        'confuse>=1.4',
        'curio>=1.4',
        'docopt',
        'psutil',
        'pyyaml',
    ],
    extras_require={
        "test": ['pytest'],
    },
    author='droidbuild developers',
    classifiers=[
        "Programming Language :: Python",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Build Tools",
    ],
)
