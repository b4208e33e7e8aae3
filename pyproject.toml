[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms, data structures and small console games for study and practice"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "bfs",
    "dfs",
    "hash-table",
    "binary-search-tree",
    "quicksort",
    "greedy",
    "fractals",
    "games",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-bfs = "algolab.bfs:main"
algolab-dfs = "algolab.dfs:main"
algolab-count-words = "algolab.count_words:main"
algolab-change = "algolab.change:main"
algolab-quicksort = "algolab.quicksort:main"
algolab-list-sort = "algolab.list_sort:main"
algolab-eggs = "algolab.eggs:main"
algolab-koch = "algolab.koch:main"
algolab-address-book = "algolab.address_book:main"
algolab-books = "algolab.books:main"
algolab-minesweeper = "algolab.minesweeper:main"
algolab-decrypt = "algolab.decrypt:main"
algolab-fuel = "algolab.fuel:main"
algolab-continent = "algolab.continent:main"
algolab-guess-number = "algolab.guess_number:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
