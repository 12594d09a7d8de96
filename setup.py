from setuptools import setup, find_packages

VERSION = "0.1.0"

def get_description():
    return "\
wkconfig validates a declarative cluster specification for the eks, wks-ssh and \
wks-footloose tracks, reports the first broken rule with a precise message and \
fills in the defaults the provisioning tooling expects."

setup(
    name="wkconfig",
    version=VERSION,
    description="Validate and default Kubernetes cluster specifications",
    long_description=get_description(),
    long_description_content_type="text/markdown",
    author="Jesús Daniel Colmenares Oviedo",
    author_email="DtxdF@disroot.org",
    classifiers=[
        "License :: OSI Approved :: BSD License",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Systems Administration",
        "Topic :: Utilities"
    ],
    package_dir={"" : "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    license="BSD 3-Clause",
    license_files=["LICENSE"],
    python_requires=">=3.8",
    install_requires=[
        "click",
        "pyaml-env",
        "python-dotenv",
        "pyyaml",
        "dnspython",
        "cryptography",
        "packaging"
    ],
    extras_require={
        "test" : [
            "pytest"
        ]
    },
    entry_points={
        "console_scripts" : [
            "wkconfig = wkconfig.__init__:cli"
        ]
    }
)
