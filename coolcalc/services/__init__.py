"""
Services around the heat load calculation: results view, report
building, PDF export and the parameter storage
"""
