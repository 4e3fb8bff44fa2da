"""
Wanderlust Backend: API Routes Package
========================================

Route Inventory:
    - health.py:      GET  /                    (liveness text)
                      GET  /health              (store connectivity)
    - contact.py:     POST /contact             (store a submission)
                      GET  /submissions         (list submissions)
    - favourites.py:  POST   /favourites        (add a place)
                      DELETE /favourites/{id}   (delete a place)
                      GET    /favourites        (list places)
    - body.py:        JSON / form body reader shared by the POST routes

Routes handle HTTP concerns only; rules live in wanderlust.services.
"""
