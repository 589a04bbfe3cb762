"""
The MODEL layer contains the preference value items and the rules that keep
them consistent. It has NO knowledge of the GUI (Qt).
"""
