import os
import subprocess

# No public API
__all__ = []

package_root = os.path.dirname(os.path.realpath(__file__))
package_name = os.path.basename(package_root)
distr_root = os.path.dirname(package_root)

STATIC_VERSION_FILE = "_static_version.py"


def get_version(version_file=STATIC_VERSION_FILE):
    version_info = {}
    with open(os.path.join(package_root, version_file), "rb") as f:
        exec(f.read(), {}, version_info)
    version = version_info["version"]
    version_is_from_git = version == "__use_git__"
    if version_is_from_git:
        version = get_version_from_git()
        if not version:
            version = get_version_from_git_archive(version_info)
        if not version:
            version = "0.0.0+unknown"
    return version


def get_version_from_git():
    try:
        p = subprocess.Popen(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=distr_root,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError:
        return
    if p.wait() != 0:
        return
    if not os.path.samefile(p.communicate()[0].decode().rstrip("\n"), distr_root):
        # quadrule is installed inside some other Git checkout.
        return

    # --first-parent: only tags on the main line count.
    for opts in [["--first-parent"], []]:
        try:
            p = subprocess.Popen(
                ["git", "describe", "--long"] + opts,
                cwd=distr_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError:
            return
        if p.wait() == 0:
            break
    else:
        return
    description = p.communicate()[0].decode().strip("v").rstrip("\n")

    release, dev, git = description.rsplit("-", 2)
    version = [release]
    labels = []
    if dev != "0":
        version.append(f".dev{dev}")
        labels.append(git)

    try:
        p = subprocess.Popen(["git", "diff", "--quiet"], cwd=distr_root)
    except OSError:
        labels.append("confused")  # This should never happen.
    else:
        if p.wait() == 1:
            labels.append("dirty")

    if labels:
        version.append("+")
        version.append(".".join(labels))

    return "".join(version)


def get_version_from_git_archive(version_info):
    try:
        refnames = version_info["refnames"]
        git_hash = version_info["git_hash"]
    except KeyError:
        # Not expanded in an sdist.
        return None

    if git_hash.startswith("$Format") or refnames.startswith("$Format"):
        # variables not expanded during 'git archive'
        return None

    TAG = "tag: v"
    refs = {r.strip() for r in refnames.split(",")}
    tags = {r[len(TAG) :] for r in refs if r.startswith(TAG)}
    if tags:
        release, *_ = sorted(tags)  # prefer e.g. "2.0" over "2.0rc1"
        return release
    else:
        return f"0.0.0+g{git_hash}"


__version__ = get_version()


# The setup.py extensions are built on demand so that importing the package
# does not require setuptools.
def get_cmdclass():
    from setuptools.command.build_py import build_py as build_py_orig
    from setuptools.command.sdist import sdist as sdist_orig

    def _write_version(fname):
        # May be a hard link into the source tree; unlink before writing.
        try:
            os.remove(fname)
        except OSError:
            pass
        with open(fname, "w") as f:
            f.write(
                "# This file has been created by setup.py.\n"
                f"version = '{__version__}'\n"
            )

    class _build_py(build_py_orig):
        def run(self):
            super().run()
            _write_version(
                os.path.join(self.build_lib, package_name, STATIC_VERSION_FILE)
            )

    class _sdist(sdist_orig):
        def make_release_tree(self, base_dir, files):
            super().make_release_tree(base_dir, files)
            _write_version(os.path.join(base_dir, package_name, STATIC_VERSION_FILE))

    return dict(sdist=_sdist, build_py=_build_py)
