# wasmpack

Helpers for the Rust → WebAssembly → npm workflow. The package finds the crate
to work on and sets up its `pkg` output directory. It fetches the helper tools
it needs (`wasm-bindgen`, `cargo-generate`), either as prebuilt releases or
through `cargo install`, and keeps them in a binary cache. It runs
`wasm-bindgen` to produce JavaScript bindings, and it can start a new project
from a template.

The external tools (`cargo`, `wasm-bindgen`, `cargo-generate`) run as child
processes. If one of them exits unsuccessfully, `wasmpack.child.CommandError`
is raised. The error holds the command name, the exit status and the full
argument list.

## Starting a new project

```
wasmpack-new my-project
```

This runs `cargo generate` in the current directory and creates a project
called `my-project` from a template repository. `cargo-generate` is found in
one of three ways, tried in order:

1. A copy on your `PATH` is used when its version matches the newest release
   on crates.io.
2. Otherwise a prebuilt release is downloaded into the binary cache.
3. If no prebuilt release is available for this host, it is built with
   `cargo install`.

Options:

- `--template URL` (or `--temp URL`) picks a different template repository.
- `-m MODE` / `--mode MODE` controls installation:
  - `normal` (the default) and `force` install missing tools.
  - `no-install` never installs anything. It fails if the tool is not already
    present.

If the project cannot be created, the command prints the error and exits
with status 1.

The same steps can be run from Python:

- `wasmpack.generate.new_project(template, name, install_permitted)` obtains
  the tool and generates the project.
- `wasmpack.generate.generate(template, name, download)` only runs the tool
  from an existing `Download`.

## Tools and the binary cache

`wasmpack.cache.get_wasm_pack_cache()` returns the cache named by the
`WASM_PACK_CACHE` environment variable. If the variable is not set, it
returns a `.wasm-pack` directory in the per-user cache directory.

`Cache.download(install_permitted, name, binaries, url)` handles release
archives:

- It fetches a `.tar.gz` or `.zip` archive and unpacks only the named
  binaries.
- A previous download of the same URL is reused.
- It returns `None` when nothing is cached and installing is not permitted.

`Download.binary(name)` gives the path of an executable. It raises
`FileNotFoundError` if the executable is not there.

```python
from wasmpack.cache import get_wasm_pack_cache
from wasmpack.install import download_prebuilt_or_cargo_install
from wasmpack.tool import Tool

cache = get_wasm_pack_cache()
download = download_prebuilt_or_cargo_install(Tool.WASM_BINDGEN, cache, "0.2.37", True)
print(download.binary("wasm-bindgen"))
```

Other functions in `wasmpack.install`:

- `download_prebuilt` fetches a prebuilt release into the cache.
- `cargo_install` builds a tool with `cargo install --root` into the cache.
- `get_cli_version` and `check_version` read and compare a tool's
  `--version` output.
- `prebuilt_url` gives the URL of a tool's prebuilt release for this host.
- `host_target` gives the target triple used for prebuilt releases.

Prebuilt releases exist only for x86_64 Linux, macOS and Windows. On other
hosts `host_target` raises `InstallError`.

`wasmpack.krate.Krate.fetch(tool)` looks up the newest published version of
a crate on crates.io.

## Running wasm-bindgen

`wasmpack.bindgen.wasm_bindgen_build(...)` runs `wasm-bindgen` over a
compiled `.wasm` file and writes the bindings to an output directory.

- `wasm_path_for(target_directory, crate_name, profile)` gives the location
  where cargo puts that file.
- The target is selected with `--target` on `wasm-bindgen` 0.2.40 and later.
- On older versions the target is selected with a stand-alone flag
  (`--browser`, `--nodejs`, `--web`, `--no-modules`).
- The `web` target needs at least 0.2.39.

## Parsing options

Build targets, profiles, install modes and npm access levels are parsed from
the strings the command line uses:

```python
from wasmpack.target import Target, BuildProfile, BuildOptions
from wasmpack.mode import InstallMode
from wasmpack.access import Access

target = Target.parse("nodejs")            # also: bundler/browser, web, no-modules
mode = InstallMode.parse("no-install")
assert not mode.install_permitted()
print(Access.parse("private"))             # --access=restricted

profile = BuildProfile.from_flags(dev=True, debug=False, release=False, profiling=False)
options = BuildOptions(release=True, out_dir="dist")
print(options.profile(), options.resolved_out_dir("my-crate"))
```

`BuildProfile.from_flags` treats `debug` as another name for `dev`. With no
flags it picks the release profile. It raises `ValueError` when more than one
of dev, release and profiling is given. Unknown targets, modes and access
levels also raise `ValueError`.

## Crate and output helpers

`wasmpack.utils` provides:

- `get_crate_path(path=None)` returns `path` when one is given. Otherwise it
  searches upward from the working directory for a `Cargo.toml`, falling back
  to `.`.
- `create_pkg_dir(out_dir)` creates the output directory and writes a
  `.gitignore` containing `*`.
- `find_pkg_directory(path)` finds a directory named `pkg` at or below
  `path`, or returns `None`.
- `elapsed(seconds)` formats a duration, for example `1m 05s` or `3.20s`.

## Installer pages

`wasmpack.installer.build_installer(root)` produces `docs/installer` from the
templates in `docs/_installer`:

- It copies `wasm-pack.js` unchanged.
- In `index.html` and `init.sh` it replaces `$VERSION` with `v` followed by
  the version from `Cargo.toml`.

## What it does not do

There is no command that builds a crate from start to finish, and nothing
here runs `cargo build` for you. You call `wasm_bindgen_build` with a `.wasm`
file you have already compiled.

The package does not do any of the following:

- check the crate configuration or the `rustc` version;
- write a `package.json`, or copy the readme or licence files;
- run `wasm-opt`;
- run tests in Node.js or in browsers;
- pack, publish or log in to an npm registry.

`Access` only parses and formats the `--access` flag.