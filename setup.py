from pathlib import Path
from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="hotel-capital",
    version="0.1.0",
    description="Compliance filter and investor scoring engines for hospitality capital raises",
    packages=find_packages(include=["hotel_capital", "hotel_capital.*"]),
    install_requires=read_requirements(),
    extras_require={"test": ["pytest", "httpx"]},
    entry_points={
        "console_scripts": [
            "hotel-capital-api=hotel_capital.api.server:main",
            "hotel-capital-check=hotel_capital.scripts.check_content:main",
        ]
    },
    python_requires=">=3.10",
    include_package_data=True,
)
