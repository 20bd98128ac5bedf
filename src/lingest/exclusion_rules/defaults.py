"""Baseline ignore patterns applied to every run.

The baseline covers dependency folders, build output, version-control metadata,
lock files, binaries, media, archives and other content that is rarely useful as
text. User patterns are added on top of it; nothing can remove a baseline entry.
"""

from typing import Tuple

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (
    # Python
    "**/*.pyc",
    "**/*.pyo",
    "**/*.pyd",
    "**/__pycache__/**",
    "**/__pycache__",
    "**/.pytest_cache/**",
    "**/.pytest_cache",
    "**/.coverage",
    "**/.tox/**",
    "**/.tox",
    "**/.nox/**",
    "**/.nox",
    "**/.mypy_cache/**",
    "**/.mypy_cache",
    "**/.ruff_cache/**",
    "**/.ruff_cache",
    "**/.hypothesis/**",
    "**/.hypothesis",
    "**/poetry.lock",
    "**/Pipfile.lock",
    "**/*.egg-info/**",
    "**/*.egg-info",
    "**/*.egg",
    "**/*.whl",
    "**/site-packages/**",
    "**/site-packages",
    # JavaScript/Node
    "**/node_modules/**",
    "**/node_modules",
    "**/bower_components/**",
    "**/bower_components",
    "**/package-lock.json",
    "**/yarn.lock",
    "**/.npm/**",
    "**/.npm",
    "**/.yarn/**",
    "**/.yarn",
    "**/.pnpm-store/**",
    "**/.pnpm-store",
    "**/bun.lock",
    "**/bun.lockb",
    # Java
    "**/*.class",
    "**/*.jar",
    "**/*.war",
    "**/*.ear",
    "**/*.nar",
    "**/.gradle/**",
    "**/.gradle",
    "**/.settings/**",
    "**/.settings",
    "**/.classpath",
    "**/gradle-app.setting",
    "**/*.gradle",
    "**/.project",
    # C/C++
    "**/*.o",
    "**/*.obj",
    "**/*.dll",
    "**/*.dylib",
    "**/*.exe",
    "**/*.lib",
    "**/*.out",
    "**/*.a",
    "**/*.pdb",
    # Swift/Xcode
    "**/.build/**",
    "**/.build",
    "**/*.xcodeproj/**",
    "**/*.xcodeproj",
    "**/*.xcworkspace/**",
    "**/*.xcworkspace",
    "**/*.pbxuser",
    "**/*.mode1v3",
    "**/*.mode2v3",
    "**/*.perspectivev3",
    "**/*.xcuserstate",
    "**/xcuserdata/**",
    "**/xcuserdata",
    "**/.swiftpm/**",
    "**/.swiftpm",
    # Ruby
    "**/*.gem",
    "**/.bundle/**",
    "**/.bundle",
    "**/vendor/bundle/**",
    "**/vendor/bundle",
    "**/Gemfile.lock",
    "**/.ruby-version",
    "**/.ruby-gemset",
    "**/.rvmrc",
    # Rust
    "**/Cargo.lock",
    "**/*.rs.bk",
    "**/target/**",
    "**/target",
    # Go
    "**/pkg/**",
    "**/pkg",
    "**/bin/**",
    "**/bin",
    # .NET/C#
    "**/obj/**",
    "**/obj",
    "**/*.suo",
    "**/*.user",
    "**/*.userosscache",
    "**/*.sln.docstates",
    "**/packages/**",
    "**/packages",
    "**/*.nupkg",
    # Version control
    "**/.git/**",
    "**/.git",
    "**/.svn/**",
    "**/.svn",
    "**/.hg/**",
    "**/.hg",
    "**/.gitignore",
    "**/.gitattributes",
    "**/.gitmodules",
    # Images and media
    "**/*.svg",
    "**/*.png",
    "**/*.jpg",
    "**/*.jpeg",
    "**/*.gif",
    "**/*.ico",
    "**/*.pdf",
    "**/*.mov",
    "**/*.mp4",
    "**/*.mp3",
    "**/*.wav",
    "**/*.bmp",
    "**/*.webp",
    "**/*.tiff",
    "**/*.psd",
    "**/*.raw",
    "**/*.heif",
    "**/*.indd",
    "**/*.ai",
    "**/*.eps",
    "**/*.avi",
    "**/*.wmv",
    "**/*.flv",
    "**/*.mkv",
    "**/*.webm",
    "**/*.vob",
    "**/*.ogv",
    "**/*.m4v",
    "**/*.3gp",
    "**/*.3g2",
    "**/*.mpeg",
    "**/*.mpg",
    "**/*.flac",
    "**/*.aac",
    "**/*.ogg",
    "**/*.wma",
    "**/*.m4a",
    "**/*.opus",
    "**/*.aiff",
    "**/*.ape",
    # Virtual environments
    "**/venv/**",
    "**/venv",
    "**/.venv/**",
    "**/.venv",
    "**/env/**",
    "**/env",
    "**/.env",
    "**/virtualenv/**",
    "**/virtualenv",
    "**/.env.local",
    "**/.env.*.local",
    "**/.env.production",
    # IDEs and editors
    "**/.idea/**",
    "**/.idea",
    "**/.vscode/**",
    "**/.vscode",
    "**/.vs/**",
    "**/.vs",
    "**/*.swo",
    "**/*.swn",
    "**/*.swp",
    "**/*.sublime-*",
    # Temporary and cache files
    "**/*.log",
    "**/*.bak",
    "**/*.tmp",
    "**/*.temp",
    "**/.cache/**",
    "**/.cache",
    "**/.sass-cache/**",
    "**/.sass-cache",
    "**/.eslintcache",
    "**/.DS_Store",
    "**/Thumbs.db",
    "**/desktop.ini",
    "**/*.backup",
    "**/*.orig",
    "**/*.rej",
    "**/*~",
    # Build directories and artifacts
    "**/build/**",
    "**/build",
    "**/dist/**",
    "**/dist",
    "**/out/**",
    "**/out",
    "**/coverage/**",
    "**/coverage",
    "**/.next/**",
    "**/.next",
    "**/.nuxt/**",
    "**/.nuxt",
    "**/_site/**",
    "**/_site",
    "**/site/**",
    "**/site",
    "**/docs/_build/**",
    "**/.docusaurus/**",
    "**/.docusaurus",
    # Bundler and tool caches
    "**/.parcel-cache/**",
    "**/.parcel-cache",
    "**/.webpack/**",
    "**/.webpack",
    "**/.rollup/**",
    "**/.rollup",
    "**/.stylelintcache",
    "**/.rpt2_cache/**",
    "**/.rpt2_cache",
    "**/.pnpm/**",
    "**/.pnpm",
    "**/.rush/**",
    "**/.rush",
    "**/.nyc_output/**",
    "**/.nyc_output",
    # Generated files
    "**/*generated*",
    "**/*.generated.*",
    # Archives
    "**/*.zip",
    "**/*.tar",
    "**/*.gz",
    "**/*.rar",
    "**/*.7z",
    "**/*.bz2",
    "**/*.xz",
    "**/*.iso",
    "**/*.dmg",
    "**/*.pkg",
    # Documents
    "**/*.doc",
    "**/*.docx",
    "**/*.xls",
    "**/*.xlsx",
    "**/*.ppt",
    "**/*.pptx",
    "**/*.odt",
    "**/*.ods",
    "**/*.odp",
    # Fonts
    "**/*.ttf",
    "**/*.otf",
    "**/*.woff",
    "**/*.woff2",
    "**/*.eot",
    "**/*.fon",
    "**/*.fnt",
    # Databases
    "**/*.db",
    "**/*.sqlite",
    "**/*.sqlite3",
    "**/*.mdb",
    "**/*.accdb",
    # Minified files and source maps
    "**/*.min.js",
    "**/*.min.css",
    "**/*.map",
    # Terraform
    "**/.terraform/**",
    "**/.terraform",
    "**/*.tfstate*",
    # Vendored dependencies
    "**/vendor/**",
    "**/vendor",
    "**/third_party/**",
    "**/third_party",
    "**/external/**",
    "**/external",
    # Data files
    "**/*.csv",
    "**/*.tsv",
    "**/*data*.json",
    "**/*fixture*.json",
    "**/*mock*.json",
    "**/*.xml",
    # Logs
    "**/logs/**",
    "**/logs",
    # Other repository digests
    "**/digest.txt",
)
