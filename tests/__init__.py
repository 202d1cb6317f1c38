"""
Only the root tests directory carries an __init__.py. Test subdirectories work as
namespace packages (PEP 420), so test module basenames must stay unique.
"""
