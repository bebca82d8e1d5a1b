"""Write YouTube scripts in the style of an existing channel"""
