# daynight/commands/__init__.py
"""
Commands package initializer. Imports every command module so their
@command decorators register with the command system.
"""
import os
import importlib

from daynight.utils.logger import Logger

package_dir = os.path.dirname(__file__)
package_name = __name__

for item in sorted(os.listdir(package_dir)):
    if item.endswith(".py") and not item.startswith("__"):
        module_name = item[:-3]
        importlib.import_module(f".{module_name}", package=package_name)
        Logger.debug("Commands", f"Loaded module: {module_name}")
