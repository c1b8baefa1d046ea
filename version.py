import os
import subprocess
import re


# This line is updated automatically
version = "0.1.0"

# If we are in the repo, the following script will update the version
# number and update this file, otherwise, we are probably in the source
# distribution and the above version number is up-to-date.
try:
    description = subprocess.check_output(
        "git describe --tags ".split(),
        stderr=subprocess.STDOUT,
        cwd=os.path.dirname(os.path.abspath(__file__)),
        universal_newlines=True)
    description = description.rstrip()

except (subprocess.CalledProcessError, OSError):
    pass

else:
    parts = description.split("-")
    parts[0] = parts[0][1:]  # remove 'v' prefix

    if len(parts) == 1:  # tagged release
        version = parts[0]
    elif len(parts) == 3:  # tag + a few commits
        tag, revision, commit = parts
        version = "{}.post{}+{}".format(tag, revision, commit)
    else:
        raise RuntimeError("Invalid version format")

    with open(__file__) as f:
        thisfile = f.read()

    with open(__file__, "w") as f:
        f.write(re.sub(r"version = \".*\"\n",
                       "version = \"{}\"\n".format(version),
                       thisfile, count=1))
