from setuptools import setup, find_packages

setup(name = "clogo",
      version = "0.1.0",
      description = "Procedural C ribbon logo renderer",
      keywords = "logo drawing svg png",
      license = "GPL",
      packages = find_packages(exclude=["tests", "examples"]),
      python_requires = ">=3.8",
      install_requires = [
        "numpy",
        "pillow>=9.1",
        ],
      extras_require = {
        "test": [
          "pytest",
          "hypothesis",
          ],
        },

      zip_safe = False,
      )
