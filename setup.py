from setuptools import setup, find_packages

setup(
    name="weather_widget",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "httpx>=0.24",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.9",
    description="OpenWeatherMap current-weather client and terminal lookup widget.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
