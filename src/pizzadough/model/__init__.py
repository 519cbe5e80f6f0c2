"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the platform screen-lock backends.
It deals with dough math, disk geometry and the wake-lock state machine.
"""
