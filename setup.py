import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
readme_path = os.path.join(here, "README.md")
long_description = open(readme_path).read() if os.path.exists(readme_path) else ""

setup(
    name="bogla",
    version="0.1.0",
    packages=find_packages(include=["bogla", "bogla.*", "sellers", "sellers.*", "commerce", "commerce.*"]),
    include_package_data=True,
    install_requires=[
        "Django>=4.2",
        "djangorestframework>=3.14",
        "django-cors-headers>=4.0",
        "python-dotenv>=1.0",
        "whitenoise>=6.5",
        "cloudinary>=1.36",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-django>=4.5",
        ],
    },
    author="Wayne",
    author_email="support@techwithwayne.com",
    description="Checkout links, order intake and a customer directory for Instagram sellers, as a Django REST API.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Framework :: Django",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License"
    ],
    python_requires='>=3.8',
)
