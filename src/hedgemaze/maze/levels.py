"""Built-in level sources.

Each entry is a literal ASCII block: ``#`` hedge, ``+`` pickup, ``S`` start,
``E`` end, space for open floor. Leading/trailing blank lines are trimmed by
the compiler, so the blocks start on the line after the opening quotes.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_LEVEL0 = """
########
#E     #
# #### #
# #  # #
# #  #+#
# #  # #
# #### #
#     S#
########"""

_LEVEL1 = """
##########
#S   #   #
# ## # # #
#    # # #
#### # # #
#    # # #
# #####+##
#       E#
##########"""

_LEVEL2 = """
############
#S    #    #
# ### # ## #
# # # # #  #
# # #+# # ##
# #   # #  #
# ### # ## #
#   #   #  #
### ##### ##
#        E #
############"""

_LEVEL3 = """
##############
#S  #        #
# # # ###### #
# # #      # #
# # ##### ## #
# #   +   #  #
# ####### #  #
#   #     # ##
# # # ##### ##
# #       # ##
# ####### # ##
#         # E#
##############"""

_LEVEL4 = """
################
#S   #         #
# ## # ####### #
# #  #       # #
# # ##### ## # #
# # #   # #  # #
# # # # # ## # #
# # # # #  # # #
# # # #+## # # #
# # #      # # #
# # ######## # #
# #          # #
# ############ #
#             E#
################"""

BUILTIN_LEVELS: Mapping[str, str] = MappingProxyType(
    {
        "Level0": _LEVEL0,
        "Level1": _LEVEL1,
        "Level2": _LEVEL2,
        "Level3": _LEVEL3,
        "Level4": _LEVEL4,
    }
)
