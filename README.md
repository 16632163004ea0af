# versionfox

Python building blocks for a tool that keeps several installed versions of an
SDK (Java, Node.js, Go and the like) side by side.

## Installation

```
pip install versionfox
```

To run the test suite:

```
pip install "versionfox[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `versionfox.versions` | `compare_version` and `sort_versions` for dotted version strings (newest first) |
| `versionfox.sets` | `MapSet` and the insertion-ordered `SortedSet` |
| `versionfox.timeutil` | `timestamp`, `begin_of_today`, `is_before_today` |
| `versionfox.files` | `file_exists`, `copy_file`, `move_files`, `change_mode_if_not`, `is_executable`, `make_symlink`, `os_type`, `arch_type` |
| `versionfox.errorstore` | `ErrorStore`, which collects errors together with a note for each |
| `versionfox.scope` | the `UseScope` and `Location` enums |
| `versionfox.registry` | `parse_registry_index` and `parse_plugin_manifest` for plugin registry JSON |
| `versionfox.decompressor` | `new_decompressor` for `.tar.gz`, `.tgz`, `.tar.xz` and `.zip` archives |
| `versionfox.downloader` | `Downloader`, which fetches a URL into a directory |
| `versionfox.archiver` | `decompress(archive_path, target_path)` |
| `versionfox.shell_escape` | `bash_escape`, `powershell_escape`, `fish_escape` |
| `versionfox.shells` | `new_shell(name)` gives hook templates and export commands for bash, zsh, fish, pwsh and clink |
| `versionfox.process` | `get_process()` returns a handler whose `open(pid)` starts a new copy of the shell running as `pid` |
| `versionfox.shim` | `Shim`, which symlinks an SDK binary into a shims directory |
| `versionfox.toolset` | `.tool-versions` records: `FileRecord`, `MultiToolVersions`, `load_tool_version`, `load_multi_tool_versions` |
| `versionfox.package` | the `Info` and `Package` descriptions of an installed SDK, and `check_package_valid` |
| `versionfox.strings` | small string helpers (`split`, `fields`, `trim`, `trim_space`, `join`, ...) |
| `versionfox.jsoncodec` | JSON `encode`, which refuses sparse arrays, mixed key types and cycles (`JsonEncodeError`), and `decode` |
| `versionfox.htmlquery` | `parse(text)` returns a `Document` whose `find` gives CSS-selector `Selection`s |
| `versionfox.httpclient` | `HttpModule` with `get`, `head` and `download_file`, raising `HttpError` |
| `versionfox.selector` | `PageKVSelect`, a paged, fuzzy-searchable picker for the terminal |

## Examples

Sort versions, newest first:

```python
from versionfox.versions import compare_version, sort_versions

compare_version("0.2.3", "0.2.1")            # 1
sort_versions(["1.2.0", "1.10.0", "1.9.1"])  # ['1.10.0', '1.9.1', '1.2.0']
```

Emit shell code that sets environment variables:

```python
from versionfox.shells import new_shell

bash = new_shell("bash")
print(bash.export({"JAVA_HOME": "/opt/java 21", "OLD_VAR": None}))
```

Each variable is exported with quoting where needed; a variable whose value is
`None` is unset.

Record the chosen tool versions for a project:

```python
from versionfox.toolset import load_tool_version

record = load_tool_version(".")
record.record["nodejs"] = "20.11.0"
record.save()
```

Unpack a downloaded archive:

```python
from versionfox.archiver import decompress

decompress("jdk-21.tar.gz", "/opt/sdks/java-21")
```

For tar archives the first path element of every entry is dropped; for zip
archives a root folder shared by all entries is dropped. An unsupported file
name raises `ValueError`.

Query an HTML page:

```python
from versionfox.htmlquery import parse

doc = parse("<div id='v'>1.2.3</div>")
doc.find("#v").text()  # '1.2.3'
```

## What this package does not do

- It has no command-line program; it is a library of parts.
- It does not load or run SDK plugins, and it has no install, uninstall or
  "use this version" workflow that ties the parts together.
- It does not manage persistent environment variables beyond producing shell
  export scripts.
- `.7z` archives are not supported.