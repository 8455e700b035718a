# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor,
# Boston, MA  02110-1301, USA.
# -----------------------------------------------------------------------------


from hdhr_dvr_manager.inventory import Inventory
from hdhr_dvr_manager.retention import RetentionEngine


class Session:
    """State shared by every command of one run against one device"""

    def __init__(self, device, store, simulate=False, verbose=False):
        self.device = device
        self.store = store
        self.inventory = Inventory(device, store)
        self.engine = RetentionEngine(self.inventory, store, device)
        self.simulate = simulate
        self.verbose = verbose

    def __repr__(self):
        return(f'<Session device={self.device}:simulate={self.simulate}>')

    @property
    def execute(self):
        """True when deletions are really carried out"""
        return(not self.simulate)

    def initialize(self, progress=None):
        """Loads the policy store and the device's series and recordings.
        progress, if given, is called with a message before each step."""

        def report(message):
            if progress is not None:
                progress(message)

        report('Loading keep and protect settings...')
        self.store.load_all()
        report('Getting series...')
        self.inventory.refresh_series(force=True)
        for series in self.inventory.series:
            report(f'Getting recordings for {series.title}...')
            self.inventory.refresh_recordings(series, force=True)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
