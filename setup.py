from pathlib import Path
from setuptools import find_packages, setup


def read_requirements(name: str = "requirements.txt") -> list[str]:
    req_path = Path(__file__).parent / name
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="promopack",
    version="0.1.0",
    description="Regulatory compliance scanning for pharmaceutical promotional claims",
    packages=find_packages(include=["promopack", "promopack.*"]),
    install_requires=read_requirements(),
    extras_require={"test": read_requirements("requirements-test.txt")},
    entry_points={
        "console_scripts": [
            "promopack-check=promopack.scripts.check_claims:main",
            "promopack-api=promopack.api.server:main",
        ]
    },
    python_requires=">=3.10",
    include_package_data=True,
)
