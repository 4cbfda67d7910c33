"""
Destiny Trials bot package.

Answers Discord queries about a player's last Trials of Osiris fireteam and
about Xur's current inventory.
"""
