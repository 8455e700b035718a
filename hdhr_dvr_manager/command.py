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


from collections import namedtuple

from hdhr_dvr_manager.const import HELP_TOKEN
from hdhr_dvr_manager.const import WILDCARD_TOKEN

# Examples of commands that parse into an Intent:
#
#  ser                 list all the series
#  ser 2               show recordings for series 2
#  ser ?               show help for the ser command
#  ser *               show all recordings for all the series
#  ser 2 del 1|*       delete recording 1 (or all) of series 2
#  ser 2 keep 4|*      keep up to 4 (or all) recordings of series 2
#  ser 2 protect 3|*   toggle protection of recording 3 (or all) of series 2
#  ser 2|* clean       delete recordings of series 2 (or all) beyond the
#                      number to keep

_Intent = namedtuple('Intent', ['object', 'seq', 'action', 'count',
                                'wildcard', 'help', 'valid'
                                ])


class Intent(_Intent):
    __slots__ = ()

    def __str__(self):
        seq = 'null' if self.seq is None else self.seq
        action = 'null' if self.action is None else self.action
        count = 'null' if self.count is None else self.count
        return(f'Obj [{self.object}]  Seq [{seq}]  All [{self.wildcard}] '
               f'Action [{action}]  Count [{count}]'
               )


INVALID_INTENT = Intent(object='', seq=None, action=None, count=None,
                        wildcard=False, help=False, valid=False
                        )


def parse(line):
    """Parses a command line into an Intent. An integer that can't be
    parsed makes the whole Intent invalid."""

    tokens = line.split()
    obj = tokens[0] if tokens else ''
    seq = None
    action = None
    count = None
    wildcard = False
    help = False

    try:
        if len(tokens) > 1:
            if tokens[1] == HELP_TOKEN:
                help = True
            elif tokens[1] == WILDCARD_TOKEN:
                wildcard = True
            else:
                seq = int(tokens[1])

        if len(tokens) > 2:
            action = tokens[2]

        if len(tokens) > 3:
            if tokens[3] == WILDCARD_TOKEN:
                wildcard = True
            else:
                count = int(tokens[3])
    except ValueError:
        return(INVALID_INTENT._replace(object=obj))

    return(Intent(object=obj, seq=seq, action=action, count=count,
                  wildcard=wildcard, help=help, valid=True
                  ))

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
