import os

import setuptools

setuptools.setup(
    name="xirc",
    version="0.1.0",
    author="The xirc developers",
    license="COIL",
    description="A trio driver that lets IRC-minded bots talk over XMPP.",
    keywords="bot network async trio irc xmpp jabber",
    install_requires=open(os.path.join(os.path.dirname(__file__), "requirements.txt"))
    .read()
    .strip()
    .split("\n"),
    extras_require={"test": ["pytest"]},
    long_description=open(os.path.join(os.path.dirname(__file__), "description.md")).read(),
    long_description_content_type="text/markdown",
    packages=["xirc", "xirc.drivers"],
    python_requires=">=3.8",
    classifiers=[
        "Framework :: Trio",
        "Topic :: System :: Networking",
        "Topic :: Software Development :: Libraries",
        "Topic :: Communications :: Chat",
        "Topic :: Communications :: Chat :: Internet Relay Chat",
    ],
)
