"""
Core package for the verified audio transcription service.

The modules in this package send an audio recording to a generative model,
collect the free-form response, and turn it into a validated summary plus an
ordered list of diarised transcript segments that the rest of the application
can render, edit and export.
"""
