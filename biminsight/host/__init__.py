"""Host collaborators — the building model and the dialog surface."""

from biminsight.host.base import Dialog, ModelHost
from biminsight.host.console import ConsoleDialog
from biminsight.host.ifc import IfcModelHost
from biminsight.host.static import StaticModelHost

__all__ = ["ConsoleDialog", "Dialog", "IfcModelHost", "ModelHost", "StaticModelHost"]
